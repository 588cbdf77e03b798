"""Game catalog command handlers (administrator only).

Catalog references (developer, publisher, genres, platforms) are checked
explicitly before writing so an unknown id yields a typed failure instead of
a foreign key error.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.game_commands import (
    CreateCatalogEntry,
    CreateGame,
    DeleteGame,
    UpdateGame,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.catalog import Developer, Genre, Platform, Publisher
from src.domain.entities.game import Game
from src.domain.errors import DuplicateRecordError
from src.domain.protocols import (
    CatalogEntry,
    CatalogKind,
    CatalogRepository,
    GameRepository,
)
from src.domain.validators import slugify

_ENTRY_TYPES: dict[CatalogKind, type] = {
    CatalogKind.DEVELOPER: Developer,
    CatalogKind.PUBLISHER: Publisher,
    CatalogKind.GENRE: Genre,
    CatalogKind.PLATFORM: Platform,
}


class GameError:
    """Game command errors."""

    GAME_NOT_FOUND = "Game not found"
    TITLE_CONFLICT = "Game with this title already exists"
    DEVELOPER_NOT_FOUND = "Developer not found"
    PUBLISHER_NOT_FOUND = "Publisher not found"
    GENRES_NOT_FOUND = "One or more genres not found"
    PLATFORMS_NOT_FOUND = "One or more platforms not found"


class CatalogError:
    """Catalog entry command errors."""

    NAME_CONFLICT = "An entry with this name already exists"


async def _check_references(
    catalog_repo: CatalogRepository,
    *,
    developer_id: UUID | None = None,
    publisher_id: UUID | None = None,
    genre_ids: list[UUID] | None = None,
    platform_ids: list[UUID] | None = None,
) -> str | None:
    """Return the first reference error, or None when every id exists."""
    if developer_id is not None and not await catalog_repo.find_by_ids(
        CatalogKind.DEVELOPER, [developer_id]
    ):
        return GameError.DEVELOPER_NOT_FOUND
    if publisher_id is not None and not await catalog_repo.find_by_ids(
        CatalogKind.PUBLISHER, [publisher_id]
    ):
        return GameError.PUBLISHER_NOT_FOUND
    if genre_ids:
        unique_ids = set(genre_ids)
        found = await catalog_repo.find_by_ids(CatalogKind.GENRE, list(unique_ids))
        if len(found) != len(unique_ids):
            return GameError.GENRES_NOT_FOUND
    if platform_ids:
        unique_ids = set(platform_ids)
        found = await catalog_repo.find_by_ids(CatalogKind.PLATFORM, list(unique_ids))
        if len(found) != len(unique_ids):
            return GameError.PLATFORMS_NOT_FOUND
    return None


class CreateGameHandler:
    """Handler for CreateGame command."""

    def __init__(
        self, game_repo: GameRepository, catalog_repo: CatalogRepository
    ) -> None:
        self._game_repo = game_repo
        self._catalog_repo = catalog_repo

    async def handle(self, cmd: CreateGame) -> Result[Game, str]:
        slug = slugify(cmd.title)
        if await self._game_repo.slug_exists(slug):
            return Failure(error=GameError.TITLE_CONFLICT)

        reference_error = await _check_references(
            self._catalog_repo,
            developer_id=cmd.developer_id,
            publisher_id=cmd.publisher_id,
            genre_ids=cmd.genre_ids,
            platform_ids=cmd.platform_ids,
        )
        if reference_error is not None:
            return Failure(error=reference_error)

        now = datetime.now(UTC)
        game = Game(
            id=uuid7(),
            title=cmd.title,
            slug=slug,
            description=cmd.description,
            summary=cmd.summary,
            release_date=cmd.release_date,
            status=cmd.status,
            cover_image=cmd.cover_image,
            developer_id=cmd.developer_id,
            publisher_id=cmd.publisher_id,
            genre_ids=list(dict.fromkeys(cmd.genre_ids)),
            platform_ids=list(dict.fromkeys(cmd.platform_ids)),
            created_at=now,
            updated_at=now,
        )
        try:
            await self._game_repo.save(game)
        except DuplicateRecordError:
            return Failure(error=GameError.TITLE_CONFLICT)
        return Success(value=game)


class UpdateGameHandler:
    """Handler for UpdateGame command.

    A title change regenerates the slug, which must stay unique.
    """

    def __init__(
        self, game_repo: GameRepository, catalog_repo: CatalogRepository
    ) -> None:
        self._game_repo = game_repo
        self._catalog_repo = catalog_repo

    async def handle(self, cmd: UpdateGame) -> Result[Game, str]:
        game = await self._game_repo.find_by_id(cmd.game_id)
        if game is None:
            return Failure(error=GameError.GAME_NOT_FOUND)

        changes: dict[str, Any] = dict(cmd.changes)
        reference_error = await _check_references(
            self._catalog_repo,
            developer_id=changes.get("developer_id"),
            publisher_id=changes.get("publisher_id"),
            genre_ids=changes.get("genre_ids"),
            platform_ids=changes.get("platform_ids"),
        )
        if reference_error is not None:
            return Failure(error=reference_error)

        for key in ("genre_ids", "platform_ids"):
            if changes.get(key) is not None:
                changes[key] = list(dict.fromkeys(changes[key]))
            elif key in changes:
                changes[key] = []

        slug_changed = game.apply_changes(changes)
        if slug_changed and await self._game_repo.slug_exists(
            game.slug, exclude_id=game.id
        ):
            return Failure(error=GameError.TITLE_CONFLICT)

        await self._game_repo.update(game)
        return Success(value=game)


class DeleteGameHandler:
    def __init__(self, game_repo: GameRepository) -> None:
        self._game_repo = game_repo

    async def handle(self, cmd: DeleteGame) -> Result[None, str]:
        if await self._game_repo.find_by_id(cmd.game_id) is None:
            return Failure(error=GameError.GAME_NOT_FOUND)

        await self._game_repo.delete(cmd.game_id)
        return Success(value=None)


class CreateCatalogEntryHandler:
    """Create a developer, publisher, genre or platform.

    The slug is derived from the name and must be unique within its kind.
    """

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, cmd: CreateCatalogEntry) -> Result[CatalogEntry, str]:
        slug = slugify(cmd.name)
        if await self._catalog_repo.slug_exists(cmd.kind, slug):
            return Failure(error=CatalogError.NAME_CONFLICT)

        entry_type = _ENTRY_TYPES[cmd.kind]
        allowed = set(entry_type.__dataclass_fields__) - {"id", "name", "slug", "created_at"}
        attributes = {k: v for k, v in cmd.attributes.items() if k in allowed}
        entry = entry_type(id=uuid7(), name=cmd.name, slug=slug, **attributes)
        try:
            await self._catalog_repo.save(cmd.kind, entry)
        except DuplicateRecordError:
            return Failure(error=CatalogError.NAME_CONFLICT)
        return Success(value=entry)
