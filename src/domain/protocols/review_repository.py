"""ReviewRepository and LikeRepository protocols."""

from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from src.domain.entities.follow import ReviewLike
from src.domain.entities.review import Review
from src.domain.enums import ReviewSortField, SortOrder


@dataclass
class ReviewView:
    """Review joined with author, game and engagement counts."""

    review: Review
    author_username: str
    game_title: str
    game_slug: str
    likes_count: int = 0
    comments_count: int = 0


@dataclass(frozen=True, kw_only=True)
class ReviewFilters:
    """Filter and sort options for review listing.

    ``include_unpublished_for`` lets an author see their own drafts when
    listing by ``user_id``.
    """

    game_id: UUID | None = None
    user_id: UUID | None = None
    user_ids: list[UUID] = field(default_factory=list)
    min_rating: float | None = None
    max_rating: float | None = None
    include_unpublished_for: UUID | None = None
    sort_by: ReviewSortField = ReviewSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class ReviewRepository(Protocol):
    """Review repository protocol (port)."""

    async def find_by_id(self, review_id: UUID) -> Review | None:
        ...

    async def find_view(self, review_id: UUID) -> ReviewView | None:
        ...

    async def find_by_user_and_game(
        self, user_id: UUID, game_id: UUID
    ) -> Review | None:
        ...

    async def list_reviews(
        self,
        filters: ReviewFilters,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[ReviewView], int]:
        """List reviews matching ``filters``.

        Returns:
            Tuple of (page of review views, total matching count).
        """
        ...

    async def count_published_by_user(self, user_id: UUID) -> int:
        ...

    async def count_likes_received(self, user_id: UUID) -> int:
        """Likes on the user's published reviews."""
        ...

    async def save(self, review: Review) -> None:
        ...

    async def update(self, review: Review) -> None:
        ...

    async def delete(self, review_id: UUID) -> None:
        ...


class LikeRepository(Protocol):
    """Review like repository protocol (port)."""

    async def exists(self, user_id: UUID, review_id: UUID) -> bool:
        ...

    async def save(self, like: ReviewLike) -> None:
        ...

    async def delete(self, user_id: UUID, review_id: UUID) -> bool:
        """Remove a like.

        Returns:
            True if a like was removed.
        """
        ...

    async def liked_review_ids(
        self, user_id: UUID, review_ids: list[UUID]
    ) -> set[UUID]:
        """Subset of ``review_ids`` liked by ``user_id``."""
        ...
