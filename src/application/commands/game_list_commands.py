"""Curated game list commands."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateGameList:
    user_id: UUID
    name: str
    description: str | None = None
    is_public: bool = True


@dataclass(frozen=True, kw_only=True)
class UpdateGameList:
    """Partially update a list (owner only)."""

    list_id: UUID
    user_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteGameList:
    list_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddGameListEntry:
    """Add a game to a list.

    Attributes:
        order: Explicit position; appended after the last entry when None.
    """

    list_id: UUID
    user_id: UUID
    game_id: UUID
    notes: str | None = None
    order: int | None = None


@dataclass(frozen=True, kw_only=True)
class RemoveGameListEntry:
    list_id: UUID
    user_id: UUID
    game_id: UUID
