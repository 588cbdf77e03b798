"""Game lists router.

Endpoints:
    GET    /api/v1/game-lists?user_id                  - A member's lists
    POST   /api/v1/game-lists                          - Create list
    GET    /api/v1/game-lists/{list_id}                - List with entries
    PATCH  /api/v1/game-lists/{list_id}                - Update own list
    DELETE /api/v1/game-lists/{list_id}                - Delete own list
    POST   /api/v1/game-lists/{list_id}/entries        - Add game to list
    DELETE /api/v1/game-lists/{list_id}/entries/{game_id} - Remove game

Private lists are reported as not found to everyone but their owner.
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.game_list_commands import (
    AddGameListEntry,
    CreateGameList,
    DeleteGameList,
    RemoveGameListEntry,
    UpdateGameList,
)
from src.application.commands.handlers.game_list_handlers import (
    AddGameListEntryHandler,
    CreateGameListHandler,
    DeleteGameListHandler,
    GameListError,
    RemoveGameListEntryHandler,
    UpdateGameListHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.game_list_queries import GetGameList, ListGameLists
from src.application.queries.handlers.game_list_handlers import (
    GameListQueryError,
    GetGameListHandler,
    ListGameListsHandler,
)
from src.core.container import (
    get_add_game_list_entry_handler,
    get_create_game_list_handler,
    get_delete_game_list_handler,
    get_get_game_list_handler,
    get_list_game_lists_handler,
    get_remove_game_list_entry_handler,
    get_update_game_list_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    OptionalUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.game_list_schemas import (
    GameListCreateRequest,
    GameListEntryCreateRequest,
    GameListEntryResponse,
    GameListResponse,
    GameListUpdateRequest,
)

_GAME_LIST_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    GameListError.LIST_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    GameListError.NOT_OWNER: ApplicationErrorCode.FORBIDDEN,
    GameListError.GAME_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    GameListError.GAME_ALREADY_IN_LIST: ApplicationErrorCode.CONFLICT,
    GameListError.GAME_NOT_IN_LIST: ApplicationErrorCode.NOT_FOUND,
    GameListQueryError.LIST_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}

_GAME_LIST_ERROR_FIELDS: dict[str, str] = {
    GameListError.GAME_NOT_FOUND: "game_id",
}


def _error(error: str, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_handler_error(
        error, request, _GAME_LIST_ERROR_CODES, _GAME_LIST_ERROR_FIELDS
    )


async def list_game_lists(
    current_user: OptionalUser,
    user_id: UUID = Query(..., description="Owner of the lists"),
    handler: ListGameListsHandler = Depends(get_list_game_lists_handler),
) -> list[GameListResponse]:
    """List a member's game lists, newest first.

    GET /api/v1/game-lists?user_id=... → 200 OK

    Owners see all their lists; everyone else sees public lists only.
    Entries are omitted, ``entries_count`` is included.
    """
    result = await handler.handle(
        ListGameLists(
            user_id=user_id,
            viewer_id=current_user.user_id if current_user else None,
        )
    )
    return [
        GameListResponse.from_entity(game_list, include_entries=False)
        for game_list in result.value  # type: ignore[union-attr]
    ]


async def create_game_list(
    current_user: AuthenticatedUser,
    data: GameListCreateRequest,
    handler: CreateGameListHandler = Depends(get_create_game_list_handler),
) -> GameListResponse:
    """POST /api/v1/game-lists → 201 Created"""
    result = await handler.handle(
        CreateGameList(user_id=current_user.user_id, **data.model_dump())
    )
    return GameListResponse.from_entity(result.value)  # type: ignore[union-attr]


async def get_game_list(
    request: Request,
    list_id: UUID,
    current_user: OptionalUser,
    handler: GetGameListHandler = Depends(get_get_game_list_handler),
) -> GameListResponse | JSONResponse:
    """Get a list with its entries ordered by position.

    GET /api/v1/game-lists/{list_id} → 200 OK
    """
    result = await handler.handle(
        GetGameList(
            list_id=list_id,
            viewer_id=current_user.user_id if current_user else None,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameListResponse.from_entity(result.value)


async def update_game_list(
    request: Request,
    current_user: AuthenticatedUser,
    list_id: UUID,
    data: GameListUpdateRequest,
    handler: UpdateGameListHandler = Depends(get_update_game_list_handler),
) -> GameListResponse | JSONResponse:
    """PATCH /api/v1/game-lists/{list_id} → 200 OK (owner only)"""
    result = await handler.handle(
        UpdateGameList(
            list_id=list_id,
            user_id=current_user.user_id,
            changes=data.model_dump(exclude_unset=True),
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameListResponse.from_entity(result.value)


async def delete_game_list(
    request: Request,
    current_user: AuthenticatedUser,
    list_id: UUID,
    handler: DeleteGameListHandler = Depends(get_delete_game_list_handler),
) -> Response:
    """DELETE /api/v1/game-lists/{list_id} → 204 No Content (owner only)"""
    result = await handler.handle(
        DeleteGameList(list_id=list_id, user_id=current_user.user_id)
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def add_game_list_entry(
    request: Request,
    current_user: AuthenticatedUser,
    list_id: UUID,
    data: GameListEntryCreateRequest,
    handler: AddGameListEntryHandler = Depends(get_add_game_list_entry_handler),
) -> GameListEntryResponse | JSONResponse:
    """Add a game to a list.

    POST /api/v1/game-lists/{list_id}/entries → 201 Created

    Without ``order`` the entry is appended after the current last one.
    """
    result = await handler.handle(
        AddGameListEntry(
            list_id=list_id,
            user_id=current_user.user_id,
            game_id=data.game_id,
            notes=data.notes,
            order=data.order,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameListEntryResponse.from_entity(result.value)


async def remove_game_list_entry(
    request: Request,
    current_user: AuthenticatedUser,
    list_id: UUID,
    game_id: UUID,
    handler: RemoveGameListEntryHandler = Depends(get_remove_game_list_entry_handler),
) -> Response:
    """DELETE /api/v1/game-lists/{list_id}/entries/{game_id} → 204 No Content"""
    result = await handler.handle(
        RemoveGameListEntry(
            list_id=list_id,
            user_id=current_user.user_id,
            game_id=game_id,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
