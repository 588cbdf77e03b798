"""Game list query handlers."""

from src.application.queries.game_list_queries import GetGameList, ListGameLists
from src.core.result import Failure, Result, Success
from src.domain.entities.game_list import GameList
from src.domain.protocols import GameListRepository


class GameListQueryError:
    LIST_NOT_FOUND = "Game list not found"


class ListGameListsHandler:
    """A user's lists; non-owners only see public ones."""

    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, query: ListGameLists) -> Result[list[GameList], str]:
        public_only = query.viewer_id != query.user_id
        return Success(
            value=await self._list_repo.list_by_user(
                query.user_id, public_only=public_only
            )
        )


class GetGameListHandler:
    def __init__(self, list_repo: GameListRepository) -> None:
        self._list_repo = list_repo

    async def handle(self, query: GetGameList) -> Result[GameList, str]:
        game_list = await self._list_repo.find_by_id(query.list_id)
        if game_list is None or not game_list.is_visible_to(query.viewer_id):
            return Failure(error=GameListQueryError.LIST_NOT_FOUND)
        return Success(value=game_list)
