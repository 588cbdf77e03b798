"""Community domain events (follows, reviews, likes, comments).

These are fact events published after the change is committed.

Handlers:
- LoggingEventHandler: ALL events
- NotificationEventHandler: UserFollowed, ReviewLiked, CommentAdded
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Social Graph
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserFollowed(DomainEvent):
    """``follower_id`` started following ``following_id``.

    Attributes:
        follower_username: Used in the notification message.
    """

    follower_id: UUID
    follower_username: str
    following_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserUnfollowed(DomainEvent):
    """``follower_id`` stopped following ``following_id``."""

    follower_id: UUID
    following_id: UUID


# ═══════════════════════════════════════════════════════════════
# Reviews
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class ReviewPublished(DomainEvent):
    """A review was created (published or as draft)."""

    review_id: UUID
    user_id: UUID
    game_id: UUID
    rating: float
    is_published: bool


@dataclass(frozen=True, kw_only=True)
class ReviewDeleted(DomainEvent):
    """A review was deleted by its author or an administrator."""

    review_id: UUID
    game_id: UUID
    deleted_by: UUID


@dataclass(frozen=True, kw_only=True)
class ReviewLiked(DomainEvent):
    """A member liked a review.

    Attributes:
        review_author_id: Notification recipient.
        liker_username: Used in the notification message.
    """

    review_id: UUID
    review_title: str
    review_author_id: UUID
    liker_id: UUID
    liker_username: str


@dataclass(frozen=True, kw_only=True)
class CommentAdded(DomainEvent):
    """A member commented on a review."""

    comment_id: UUID
    review_id: UUID
    review_title: str
    review_author_id: UUID
    commenter_id: UUID
    commenter_username: str
