"""Game catalog queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import GameSortField, GameStatus, SortOrder
from src.domain.protocols import CatalogKind


@dataclass(frozen=True, kw_only=True)
class ListGames:
    """Search and filter the catalog.

    Attributes:
        search: Case-insensitive match on title or description.
        min_rating: Lower bound on average_rating (0-10).
        max_rating: Upper bound on average_rating (0-10).
    """

    search: str | None = None
    genre_id: UUID | None = None
    platform_id: UUID | None = None
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    status: GameStatus | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    sort_by: GameSortField = GameSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    page: int = 1
    limit: int = 12


@dataclass(frozen=True, kw_only=True)
class GetGame:
    """Game detail page by slug."""

    slug: str


@dataclass(frozen=True, kw_only=True)
class ListSimilarGames:
    game_id: UUID
    limit: int = 6


@dataclass(frozen=True, kw_only=True)
class ListCatalogEntries:
    kind: CatalogKind
