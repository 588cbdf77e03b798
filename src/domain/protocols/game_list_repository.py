"""GameListRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.game_list import GameList, GameListEntry


class GameListRepository(Protocol):
    """Game list repository protocol (port).

    Lists are always returned with their entries ordered by ``order``.
    """

    async def find_by_id(self, list_id: UUID) -> GameList | None:
        ...

    async def list_by_user(
        self, user_id: UUID, *, public_only: bool, limit: int | None = None
    ) -> list[GameList]:
        """Lists owned by ``user_id``, newest first."""
        ...

    async def count_by_user(self, user_id: UUID, *, public_only: bool) -> int:
        ...

    async def save(self, game_list: GameList) -> None:
        ...

    async def update(self, game_list: GameList) -> None:
        ...

    async def delete(self, list_id: UUID) -> None:
        ...

    async def add_entry(self, entry: GameListEntry) -> None:
        ...

    async def remove_entry(self, list_id: UUID, game_id: UUID) -> bool:
        """Remove a game from a list.

        Returns:
            True if an entry was removed.
        """
        ...
