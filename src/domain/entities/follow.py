"""Follow relationship and review like entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Follow:
    """Directed relationship: ``follower_id`` follows ``following_id``."""

    id: UUID
    follower_id: UUID
    following_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class ReviewLike:
    """A member's like on a review (unique per user and review)."""

    id: UUID
    user_id: UUID
    review_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
