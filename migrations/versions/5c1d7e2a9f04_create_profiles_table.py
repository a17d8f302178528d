"""create_profiles_table

Revision ID: 5c1d7e2a9f04
Revises:
Create Date: 2026-10-19 09:12:44.318206

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1d7e2a9f04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles table."""
    op.create_table('profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.Text(), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        # Ordered arrays of profile ID strings; no foreign keys, stale IDs are allowed
        sa.Column('followers', sa.JSON(), nullable=False),
        sa.Column('following', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Drop profiles table."""
    op.drop_table('profiles')
