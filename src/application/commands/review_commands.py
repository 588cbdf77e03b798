"""Review, like and comment commands."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateReview:
    """Write a review for a game (one per user and game)."""

    user_id: UUID
    game_id: UUID
    title: str
    content: str
    rating: float
    is_published: bool = True
    is_spoiler: bool = False


@dataclass(frozen=True, kw_only=True)
class UpdateReview:
    """Partially update one's own review."""

    review_id: UUID
    user_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteReview:
    """Delete a review.

    Attributes:
        is_admin: Administrators may delete any review.
    """

    review_id: UUID
    user_id: UUID
    is_admin: bool = False


@dataclass(frozen=True, kw_only=True)
class LikeReview:
    """Like a published review.

    Attributes:
        username: Liker's username, used in the author's notification.
    """

    review_id: UUID
    user_id: UUID
    username: str


@dataclass(frozen=True, kw_only=True)
class UnlikeReview:
    review_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddComment:
    """Comment on a published review."""

    review_id: UUID
    user_id: UUID
    username: str
    content: str


@dataclass(frozen=True, kw_only=True)
class DeleteComment:
    """Delete a comment (author or administrator)."""

    comment_id: UUID
    user_id: UUID
    is_admin: bool = False
