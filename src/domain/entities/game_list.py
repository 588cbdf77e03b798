"""Curated game list entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class GameListEntry:
    """A game placed in a list, with optional notes and explicit order."""

    id: UUID
    list_id: UUID
    game_id: UUID
    order: int = 0
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class GameList:
    """A member's curated list of games.

    Business Rules:
        - A game appears at most once per list
        - Private lists are visible to their owner only
    """

    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    is_public: bool = True
    entries: list[GameListEntry] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_owned_by(self, user_id: UUID | None) -> bool:
        return user_id is not None and self.user_id == user_id

    def is_visible_to(self, viewer_id: UUID | None) -> bool:
        return self.is_public or self.is_owned_by(viewer_id)

    def contains_game(self, game_id: UUID) -> bool:
        return any(entry.game_id == game_id for entry in self.entries)

    def next_order(self) -> int:
        """Order value that appends after the current last entry."""
        if not self.entries:
            return 0
        return max(entry.order for entry in self.entries) + 1

    def apply_changes(self, changes: dict[str, object]) -> None:
        for name in ("name", "description", "is_public"):
            if name in changes:
                setattr(self, name, changes[name])
        self.updated_at = datetime.now(UTC)
