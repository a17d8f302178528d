"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities.

    Behaves like an ordered map keyed by profile ID: ``insert`` overwrites
    any existing record with the same ID (last write wins).
    """

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def list_all(self) -> list[Profile]:
        """Get all profiles ordered by ID."""
        ...

    async def insert(self, profile: Profile) -> Profile:
        """Store a profile, replacing any existing record with the same ID."""
        ...

    async def remove(self, id: UUID) -> Profile | None:
        """Remove a profile and return it, or None if it did not exist."""
        ...
