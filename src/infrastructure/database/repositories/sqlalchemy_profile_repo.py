"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Profile]:
        """Get all profiles ordered by ID."""
        stmt = select(ProfileModel).order_by(ProfileModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def insert(self, profile: Profile) -> Profile:
        """Store a profile, overwriting any existing row with the same ID."""
        model = await self._get_model(profile.id)

        if model:
            model.username = profile.username
            model.bio = profile.bio
            model.followers = list(profile.followers)
            model.following = list(profile.following)
            model.created_at = profile.created_at
            model.updated_at = profile.updated_at
        else:
            model = self._to_model(profile)
            self._session.add(model)

        await self._session.flush()
        return self._to_entity(model)

    async def remove(self, id: UUID) -> Profile | None:
        """Delete a profile and return what was stored."""
        model = await self._get_model(id)

        if not model:
            return None

        removed = self._to_entity(model)
        await self._session.delete(model)
        await self._session.flush()
        return removed

    async def _get_model(self, id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            username=model.username,
            bio=model.bio,
            followers=tuple(model.followers or []),
            following=tuple(model.following or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            username=entity.username,
            bio=entity.bio,
            followers=list(entity.followers),
            following=list(entity.following),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
