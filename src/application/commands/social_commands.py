"""Social graph commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class FollowUser:
    """Start following another member.

    Attributes:
        follower_username: Used in the followed member's notification.
    """

    follower_id: UUID
    follower_username: str
    following_id: UUID


@dataclass(frozen=True, kw_only=True)
class UnfollowUser:
    follower_id: UUID
    following_id: UUID
