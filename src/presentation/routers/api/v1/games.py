"""Games resource router.

Endpoints:
    GET    /api/v1/games                    - List games (filters, sorting)
    GET    /api/v1/games/{slug}             - Game detail
    GET    /api/v1/games/{game_id}/similar  - Games sharing a genre
    POST   /api/v1/games                    - Create game (admin)
    PATCH  /api/v1/games/{game_id}          - Update game (admin)
    DELETE /api/v1/games/{game_id}          - Delete game (admin)
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.game_commands import CreateGame, DeleteGame, UpdateGame
from src.application.commands.handlers.game_handlers import (
    CreateGameHandler,
    DeleteGameHandler,
    GameError,
    UpdateGameHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.game_queries import GetGame, ListGames, ListSimilarGames
from src.application.queries.handlers.game_handlers import (
    GameQueryError,
    GetGameHandler,
    ListGamesHandler,
    ListSimilarGamesHandler,
)
from src.core.container import (
    get_create_game_handler,
    get_delete_game_handler,
    get_get_game_handler,
    get_list_games_handler,
    get_list_similar_games_handler,
    get_update_game_handler,
)
from src.core.result import Failure
from src.domain.enums import GameSortField, GameStatus, SortOrder
from src.presentation.routers.api.middleware.auth_dependencies import AdminUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PaginatedResponse, PaginationMeta
from src.schemas.game_schemas import (
    GameCreateRequest,
    GameDetailResponse,
    GameResponse,
    GameUpdateRequest,
)

_GAME_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    GameError.GAME_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    GameError.TITLE_CONFLICT: ApplicationErrorCode.CONFLICT,
    GameError.DEVELOPER_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    GameError.PUBLISHER_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    GameError.GENRES_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    GameError.PLATFORMS_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    GameQueryError.GAME_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}

# Reference errors point at the offending request field
_GAME_ERROR_FIELDS: dict[str, str] = {
    GameError.DEVELOPER_NOT_FOUND: "developer_id",
    GameError.PUBLISHER_NOT_FOUND: "publisher_id",
    GameError.GENRES_NOT_FOUND: "genre_ids",
    GameError.PLATFORMS_NOT_FOUND: "platform_ids",
}


def _error(error: str, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_handler_error(
        error, request, _GAME_ERROR_CODES, _GAME_ERROR_FIELDS
    )


async def list_games(
    search: str | None = Query(None, max_length=200),
    genre_id: UUID | None = Query(None),
    platform_id: UUID | None = Query(None),
    developer_id: UUID | None = Query(None),
    publisher_id: UUID | None = Query(None),
    game_status: GameStatus | None = Query(None, alias="status"),
    min_rating: float | None = Query(None, ge=0, le=10),
    max_rating: float | None = Query(None, ge=0, le=10),
    sort_by: GameSortField = Query(GameSortField.CREATED_AT),
    sort_order: SortOrder = Query(SortOrder.DESC),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    handler: ListGamesHandler = Depends(get_list_games_handler),
) -> PaginatedResponse[GameResponse]:
    """List games with filtering, sorting and pagination.

    GET /api/v1/games → 200 OK
    """
    result = await handler.handle(
        ListGames(
            search=search,
            genre_id=genre_id,
            platform_id=platform_id,
            developer_id=developer_id,
            publisher_id=publisher_id,
            status=game_status,
            min_rating=min_rating,
            max_rating=max_rating,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )
    )
    # ListGames has no failure path
    games = result.value  # type: ignore[union-attr]
    return PaginatedResponse[GameResponse](
        items=[GameResponse.model_validate(game) for game in games.items],
        meta=PaginationMeta.from_page(games),
    )


async def get_game(
    request: Request,
    slug: str,
    handler: GetGameHandler = Depends(get_get_game_handler),
) -> GameDetailResponse | JSONResponse:
    """Get a game by slug, with catalog references and latest reviews.

    GET /api/v1/games/{slug} → 200 OK
    """
    result = await handler.handle(GetGame(slug=slug))

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameDetailResponse.from_dto(result.value)


async def list_similar_games(
    request: Request,
    game_id: UUID,
    limit: int = Query(6, ge=1, le=20),
    handler: ListSimilarGamesHandler = Depends(get_list_similar_games_handler),
) -> list[GameResponse] | JSONResponse:
    """GET /api/v1/games/{game_id}/similar → 200 OK"""
    result = await handler.handle(ListSimilarGames(game_id=game_id, limit=limit))

    if isinstance(result, Failure):
        return _error(result.error, request)

    return [GameResponse.model_validate(game) for game in result.value]


async def create_game(
    request: Request,
    current_user: AdminUser,
    data: GameCreateRequest,
    handler: CreateGameHandler = Depends(get_create_game_handler),
) -> GameResponse | JSONResponse:
    """Create a game (admin only).

    POST /api/v1/games → 201 Created

    Returns:
        GameResponse on success.
        JSONResponse 409 if the derived slug is taken.
        JSONResponse 400 if a referenced catalog entry does not exist.
    """
    result = await handler.handle(CreateGame(**data.model_dump()))

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameResponse.model_validate(result.value)


async def update_game(
    request: Request,
    current_user: AdminUser,
    game_id: UUID,
    data: GameUpdateRequest,
    handler: UpdateGameHandler = Depends(get_update_game_handler),
) -> GameResponse | JSONResponse:
    """Partially update a game (admin only).

    PATCH /api/v1/games/{game_id} → 200 OK

    Only fields present in the request body are applied.
    """
    result = await handler.handle(
        UpdateGame(game_id=game_id, changes=data.model_dump(exclude_unset=True))
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return GameResponse.model_validate(result.value)


async def delete_game(
    request: Request,
    current_user: AdminUser,
    game_id: UUID,
    handler: DeleteGameHandler = Depends(get_delete_game_handler),
) -> Response:
    """DELETE /api/v1/games/{game_id} → 204 No Content"""
    result = await handler.handle(DeleteGame(game_id=game_id))

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
