"""Integration tests for the SQLAlchemy profile repository."""

from datetime import datetime
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)


@pytest.fixture
def repo(db_session: AsyncSession) -> SQLAlchemyProfileRepository:
    return SQLAlchemyProfileRepository(db_session)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_insert_then_get(self, repo: SQLAlchemyProfileRepository):
        profile = Profile(username="alice", bio="x")

        await repo.insert(profile)
        loaded = await repo.get(profile.id)

        assert loaded == profile

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repo: SQLAlchemyProfileRepository):
        assert await repo.get(uuid4()) is None

    @pytest.mark.asyncio
    async def test_insert_overwrites_existing(self, repo: SQLAlchemyProfileRepository):
        followed, fan = str(uuid4()), "legacy-fan"
        profile = Profile(username="alice", bio="x")
        await repo.insert(profile)

        changed = profile.with_following(followed).with_follower(fan)
        changed = changed.with_details("alicia", "y", datetime.utcnow())
        await repo.insert(changed)
        loaded = await repo.get(profile.id)

        assert loaded is not None
        assert loaded.username == "alicia"
        assert loaded.following == (followed,)
        assert loaded.followers == (fan,)
        assert loaded.updated_at is not None

    @pytest.mark.asyncio
    async def test_relationship_order_is_preserved(self, repo: SQLAlchemyProfileRepository):
        ids = [str(uuid4()) for _ in range(5)]
        profile = Profile(username="alice", bio="x", following=tuple(ids))

        await repo.insert(profile)
        loaded = await repo.get(profile.id)

        assert loaded is not None
        assert list(loaded.following) == ids

    @pytest.mark.asyncio
    async def test_list_all_is_ordered_by_id(self, repo: SQLAlchemyProfileRepository):
        profiles = [Profile(username=f"user{i}", bio="x") for i in range(4)]
        for profile in profiles:
            await repo.insert(profile)

        listed = await repo.list_all()

        assert {p.id for p in listed} == {p.id for p in profiles}
        assert [p.id for p in listed] == sorted(p.id for p in profiles)

    @pytest.mark.asyncio
    async def test_remove_returns_stored_profile(self, repo: SQLAlchemyProfileRepository):
        profile = Profile(username="alice", bio="x")
        await repo.insert(profile)

        removed = await repo.remove(profile.id)

        assert removed == profile
        assert await repo.get(profile.id) is None
        assert await repo.remove(profile.id) is None
