"""Sorting direction and sortable fields for list queries."""

from enum import Enum


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class GameSortField(str, Enum):
    """Sortable game fields."""

    TITLE = "title"
    RELEASE_DATE = "release_date"
    AVERAGE_RATING = "average_rating"
    REVIEW_COUNT = "review_count"
    CREATED_AT = "created_at"


class ReviewSortField(str, Enum):
    """Sortable review fields."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    RATING = "rating"
    LIKES_COUNT = "likes_count"
