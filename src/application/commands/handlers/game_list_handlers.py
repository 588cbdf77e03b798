"""Game list command handlers.

Only the owner may change a list. A private list is indistinguishable from
a missing one for everybody else.
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.game_list_commands import (
    AddGameListEntry,
    CreateGameList,
    DeleteGameList,
    RemoveGameListEntry,
    UpdateGameList,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.game_list import GameList, GameListEntry
from src.domain.errors import DuplicateRecordError
from src.domain.protocols import GameListRepository, GameRepository


class GameListError:
    """Game list command errors."""

    LIST_NOT_FOUND = "Game list not found"
    NOT_OWNER = "You can only modify your own game lists"
    GAME_NOT_FOUND = "Game not found"
    GAME_ALREADY_IN_LIST = "Game already in list"
    GAME_NOT_IN_LIST = "Game not in list"


async def _load_owned_list(
    list_repo: GameListRepository, list_id: UUID, user_id: UUID
) -> Result[GameList, str]:
    game_list = await list_repo.find_by_id(list_id)
    if game_list is None or not game_list.is_visible_to(user_id):
        return Failure(error=GameListError.LIST_NOT_FOUND)
    if not game_list.is_owned_by(user_id):
        return Failure(error=GameListError.NOT_OWNER)
    return Success(value=game_list)


class CreateGameListHandler:
    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, cmd: CreateGameList) -> Result[GameList, str]:
        now = datetime.now(UTC)
        game_list = GameList(
            id=uuid7(),
            user_id=cmd.user_id,
            name=cmd.name,
            description=cmd.description,
            is_public=cmd.is_public,
            created_at=now,
            updated_at=now,
        )
        await self._list_repo.save(game_list)
        return Success(value=game_list)


class UpdateGameListHandler:
    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, cmd: UpdateGameList) -> Result[GameList, str]:
        result = await _load_owned_list(self._list_repo, cmd.list_id, cmd.user_id)
        if isinstance(result, Failure):
            return result

        game_list = result.value
        game_list.apply_changes(cmd.changes)
        await self._list_repo.update(game_list)
        return Success(value=game_list)


class DeleteGameListHandler:
    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, cmd: DeleteGameList) -> Result[None, str]:
        result = await _load_owned_list(self._list_repo, cmd.list_id, cmd.user_id)
        if isinstance(result, Failure):
            return result

        await self._list_repo.delete(cmd.list_id)
        return Success(value=None)


class AddGameListEntryHandler:
    """Add a game to a list; appended after the last entry unless ordered."""

    def __init__(
        self, list_repo: GameListRepository, game_repo: GameRepository
    ) -> None:
        self._list_repo = list_repo
        self._game_repo = game_repo

    async def handle(self, cmd: AddGameListEntry) -> Result[GameListEntry, str]:
        result = await _load_owned_list(self._list_repo, cmd.list_id, cmd.user_id)
        if isinstance(result, Failure):
            return result

        game_list = result.value
        if await self._game_repo.find_by_id(cmd.game_id) is None:
            return Failure(error=GameListError.GAME_NOT_FOUND)
        if game_list.contains_game(cmd.game_id):
            return Failure(error=GameListError.GAME_ALREADY_IN_LIST)

        entry = GameListEntry(
            id=uuid7(),
            list_id=game_list.id,
            game_id=cmd.game_id,
            order=cmd.order if cmd.order is not None else game_list.next_order(),
            notes=cmd.notes,
            created_at=datetime.now(UTC),
        )
        try:
            await self._list_repo.add_entry(entry)
        except DuplicateRecordError:
            return Failure(error=GameListError.GAME_ALREADY_IN_LIST)
        return Success(value=entry)


class RemoveGameListEntryHandler:
    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, cmd: RemoveGameListEntry) -> Result[None, str]:
        result = await _load_owned_list(self._list_repo, cmd.list_id, cmd.user_id)
        if isinstance(result, Failure):
            return result

        if not await self._list_repo.remove_entry(cmd.list_id, cmd.game_id):
            return Failure(error=GameListError.GAME_NOT_IN_LIST)
        return Success(value=None)
