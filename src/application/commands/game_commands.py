"""Game catalog commands (administrator only)."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import UUID

from src.domain.enums import GameStatus
from src.domain.protocols import CatalogKind


@dataclass(frozen=True, kw_only=True)
class CreateGame:
    """Add a game to the catalog. The slug is derived from ``title``."""

    title: str
    description: str | None = None
    summary: str | None = None
    release_date: date | None = None
    status: GameStatus = GameStatus.RELEASED
    cover_image: str | None = None
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    genre_ids: list[UUID] = field(default_factory=list)
    platform_ids: list[UUID] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateGame:
    """Partially update a game.

    Attributes:
        changes: Only the fields present in the request body.
    """

    game_id: UUID
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteGame:
    game_id: UUID


@dataclass(frozen=True, kw_only=True)
class CreateCatalogEntry:
    """Create a developer, publisher, genre or platform.

    Attributes:
        kind: Which catalog the entry belongs to.
        name: Display name; the slug is derived from it.
        attributes: Kind-specific optional fields (website, country...).
    """

    kind: CatalogKind
    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
