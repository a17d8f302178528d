"""Profile domain entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class Profile:
    """Domain entity for a user profile and its follow relationships.

    Profiles are immutable values. Every change goes through one of the
    ``with_*``/``without_*`` helpers, which return a new instance and leave
    the original untouched.

    Relationship lists hold ids as opaque strings. They are not checked
    against stored profiles and may outlive the profiles they name.
    """

    username: str
    bio: str
    id: UUID = field(default_factory=uuid4)
    followers: tuple[str, ...] = ()
    following: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime | None = None

    def with_details(self, username: str, bio: str, updated_at: datetime) -> "Profile":
        """Replace the editable fields and stamp the update time."""
        return replace(self, username=username, bio=bio, updated_at=updated_at)

    def with_following(self, profile_id: str) -> "Profile":
        """Return a copy following ``profile_id`` (no-op if already followed)."""
        if profile_id in self.following:
            return self
        return replace(self, following=(*self.following, profile_id))

    def without_following(self, profile_id: str) -> "Profile":
        """Return a copy that no longer follows ``profile_id``."""
        if profile_id not in self.following:
            return self
        return replace(
            self,
            following=tuple(pid for pid in self.following if pid != profile_id),
        )

    def with_follower(self, user_id: str) -> "Profile":
        """Return a copy with ``user_id`` recorded as a follower."""
        if user_id in self.followers:
            return self
        return replace(self, followers=(*self.followers, user_id))

    def without_follower(self, user_id: str) -> "Profile":
        """Return a copy with ``user_id`` removed from the followers."""
        if user_id not in self.followers:
            return self
        return replace(
            self,
            followers=tuple(uid for uid in self.followers if uid != user_id),
        )
