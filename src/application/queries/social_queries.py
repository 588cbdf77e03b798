"""Social graph and activity feed queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import ActivityType


@dataclass(frozen=True, kw_only=True)
class IsFollowing:
    follower_id: UUID
    following_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetFeed:
    """Activity of the caller and everyone they follow.

    Attributes:
        type: Restrict to review or follow activity; both when None.
    """

    user_id: UUID
    type: ActivityType | None = None
    page: int = 1
    limit: int = 20


@dataclass(frozen=True, kw_only=True)
class GetSocialStats:
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetMutualFollows:
    """Users followed by both the caller and ``other_id``."""

    user_id: UUID
    other_id: UUID


@dataclass(frozen=True, kw_only=True)
class SuggestFollows:
    user_id: UUID
    limit: int = 10
