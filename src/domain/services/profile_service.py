"""Profile service layer with business logic."""

from datetime import datetime
from typing import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import (
    InvalidPayloadError,
    ProfileNotFoundError,
    ProfileRetrievalError,
)
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


def parse_profile_id(raw_id: str) -> UUID:
    """Turn a raw identifier into a UUID, or raise ProfileNotFoundError.

    Empty and malformed identifiers can never match a stored profile, so
    they are rejected before any lookup.
    """
    if not raw_id:
        raise ProfileNotFoundError(raw_id)
    try:
        return UUID(raw_id)
    except ValueError:
        raise ProfileNotFoundError(raw_id) from None


def relationship_key(raw_id: str) -> tuple[str, UUID | None]:
    """Return the list entry for a followed id and its UUID, if it has one.

    Relationship lists store ids verbatim, so an id that can never name a
    stored profile can still be followed and unfollowed. UUIDs are stored in
    canonical form so differently cased spellings collapse to one entry.
    """
    if not raw_id:
        raise ProfileNotFoundError(raw_id)
    try:
        pid = UUID(raw_id)
    except ValueError:
        return raw_id, None
    return str(pid), pid


def validate_payload(username: str, bio: str) -> None:
    """Reject empty username/bio values."""
    empty = [name for name, value in (("username", username), ("bio", bio)) if not value]
    if empty:
        raise InvalidPayloadError(empty)


class ProfileService:
    """Service layer for Profile business logic.

    Follow and unfollow are dual writes: the requester's ``following`` list
    and the target's ``followers`` list are updated in two separately
    committed units of work. A failure on the second write does not undo
    the first, so the graph can be left asymmetric.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self) -> list[Profile]:
        """Get all profiles in ID order."""
        try:
            async with self._uow_factory() as uow:
                return await uow.profiles.list_all()
        except SQLAlchemyError as e:
            logger.error("profile_list_failed", error=str(e))
            raise ProfileRetrievalError(type(e).__name__) from e

    async def get_profile(self, profile_id: str) -> Profile:
        """Get a single profile."""
        pid = parse_profile_id(profile_id)
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(pid)
            if not profile:
                raise ProfileNotFoundError(profile_id)
            return profile

    async def create_profile(self, username: str, bio: str) -> Profile:
        """Create a profile with empty relationship lists."""
        validate_payload(username, bio)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.insert(Profile(username=username, bio=bio))
            await uow.commit()

        logger.info("profile_created", profile_id=str(profile.id))
        return profile

    async def update_profile(self, profile_id: str, username: str, bio: str) -> Profile:
        """Replace username and bio, keeping ID, creation time and relationships."""
        pid = parse_profile_id(profile_id)
        validate_payload(username, bio)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(pid)
            if not profile:
                raise ProfileNotFoundError(profile_id)

            updated = profile.with_details(username, bio, datetime.utcnow())
            updated = await uow.profiles.insert(updated)
            await uow.commit()

        logger.info("profile_updated", profile_id=profile_id)
        return updated

    async def delete_profile(self, profile_id: str) -> Profile:
        """Remove a profile and return it.

        Other profiles keep any references to the deleted ID in their
        ``followers``/``following`` lists.
        """
        pid = parse_profile_id(profile_id)
        async with self._uow_factory() as uow:
            removed = await uow.profiles.remove(pid)
            if not removed:
                raise ProfileNotFoundError(profile_id)
            await uow.commit()

        logger.info("profile_deleted", profile_id=profile_id)
        return removed

    async def follow_profile(self, user_id: str, profile_id: str) -> Profile:
        """Make ``user_id`` follow ``profile_id``.

        Returns the requester's profile as it stands after the first write.
        The second write (recording the follower on the target) always runs
        and its outcome is only logged. ``profile_id`` is not required to
        name a stored profile.
        """
        user_key, uid = relationship_key(user_id)
        target_key, pid = relationship_key(profile_id)

        requester = await self._apply(
            uid, lambda profile: profile.with_following(target_key)
        )

        target = await self._apply(
            pid, lambda profile: profile.with_follower(user_key)
        )
        target_found = target is not None
        if not target_found:
            logger.warning("follow_target_missing", user_id=user_id, profile_id=profile_id)

        if requester is None:
            raise ProfileNotFoundError(user_id)

        logger.info(
            "profile_followed",
            user_id=user_id,
            profile_id=profile_id,
            target_found=target_found,
        )
        return requester

    async def unfollow_profile(self, user_id: str, profile_id: str) -> Profile:
        """Make ``user_id`` stop following ``profile_id``.

        Mirrors :meth:`follow_profile`: two independent writes, the
        requester's post-write profile is returned, and a missing target is
        only logged.
        """
        user_key, uid = relationship_key(user_id)
        target_key, pid = relationship_key(profile_id)

        requester = await self._apply(
            uid, lambda profile: profile.without_following(target_key)
        )

        target = await self._apply(
            pid, lambda profile: profile.without_follower(user_key)
        )
        target_found = target is not None
        if not target_found:
            logger.warning("unfollow_target_missing", user_id=user_id, profile_id=profile_id)

        if requester is None:
            raise ProfileNotFoundError(user_id)

        logger.info(
            "profile_unfollowed",
            user_id=user_id,
            profile_id=profile_id,
            target_found=target_found,
        )
        return requester

    async def _apply(
        self, pid: UUID | None, change: Callable[[Profile], Profile]
    ) -> Profile | None:
        """Apply ``change`` to one stored profile in its own unit of work.

        Returns the profile after the change, or None when there is no stored
        profile to change. Unchanged profiles are not written.
        """
        if pid is None:
            return None

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(pid)
            if not profile:
                return None
            changed = change(profile)
            if changed is not profile:
                await uow.profiles.insert(changed)
                await uow.commit()
        return changed
