"""GameRepository protocol for the game catalog."""

from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from src.domain.entities.game import Game
from src.domain.enums import GameSortField, GameStatus, SortOrder


@dataclass(frozen=True, kw_only=True)
class GameFilters:
    """Filter and sort options for game listing."""

    search: str | None = None
    genre_ids: list[UUID] = field(default_factory=list)
    platform_ids: list[UUID] = field(default_factory=list)
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    status: GameStatus | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    sort_by: GameSortField = GameSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class GameRepository(Protocol):
    """Game repository protocol (port)."""

    async def find_by_id(self, game_id: UUID) -> Game | None:
        ...

    async def find_by_slug(self, slug: str) -> Game | None:
        ...

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """Check slug uniqueness, optionally ignoring one game."""
        ...

    async def list_games(
        self,
        filters: GameFilters,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[Game], int]:
        """List games matching ``filters``.

        Returns:
            Tuple of (page of games, total matching count).
        """
        ...

    async def find_similar(self, game: Game, limit: int) -> list[Game]:
        """Other games sharing at least one genre, best rated first."""
        ...

    async def save(self, game: Game) -> None:
        ...

    async def update(self, game: Game) -> None:
        ...

    async def delete(self, game_id: UUID) -> None:
        ...

    async def refresh_rating_stats(self, game_id: UUID) -> tuple[float, int]:
        """Recompute average_rating and review_count from published reviews.

        Returns:
            Tuple of (average_rating, review_count). Average is 0 when there
            are no published reviews.
        """
        ...
