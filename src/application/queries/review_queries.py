"""Review and comment queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import ReviewSortField, SortOrder


@dataclass(frozen=True, kw_only=True)
class ListReviews:
    """Paginated review listing.

    Attributes:
        viewer_id: Caller; sees their own drafts when ``user_id`` is theirs
            and gets ``is_liked`` flags.
    """

    game_id: UUID | None = None
    user_id: UUID | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    sort_by: ReviewSortField = ReviewSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    viewer_id: UUID | None = None
    page: int = 1
    limit: int = 12


@dataclass(frozen=True, kw_only=True)
class GetReview:
    review_id: UUID
    viewer_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class ListComments:
    """Comments on a review, oldest first."""

    review_id: UUID
    page: int = 1
    limit: int = 20
