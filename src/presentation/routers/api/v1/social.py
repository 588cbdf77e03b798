"""Social graph router.

Endpoints:
    POST   /api/v1/users/{user_id}/follow  - Follow a member
    DELETE /api/v1/users/{user_id}/follow  - Unfollow a member
    GET    /api/v1/users/{user_id}/follow  - Whether the caller follows them
    GET    /api/v1/users/{user_id}/stats   - Follower/review/like counters
    GET    /api/v1/users/{user_id}/mutual  - Members both users follow
    GET    /api/v1/users/suggestions       - Who to follow
    GET    /api/v1/feed                    - Activity feed
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.follow_handlers import (
    FollowError,
    FollowUserHandler,
    UnfollowUserHandler,
)
from src.application.commands.social_commands import FollowUser, UnfollowUser
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.social_handlers import (
    GetFeedHandler,
    GetMutualFollowsHandler,
    GetSocialStatsHandler,
    IsFollowingHandler,
    SocialQueryError,
    SuggestFollowsHandler,
)
from src.application.queries.social_queries import (
    GetFeed,
    GetMutualFollows,
    GetSocialStats,
    IsFollowing,
    SuggestFollows,
)
from src.core.container import (
    get_feed_handler,
    get_follow_user_handler,
    get_is_following_handler,
    get_mutual_follows_handler,
    get_social_stats_handler,
    get_suggest_follows_handler,
    get_unfollow_user_handler,
)
from src.core.result import Failure
from src.domain.enums import ActivityType
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from src.schemas.user_schemas import (
    ActivityResponse,
    FollowStatusResponse,
    FollowSuggestionResponse,
    MutualFollowsResponse,
    SocialStatsResponse,
)

_SOCIAL_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    FollowError.CANNOT_FOLLOW_SELF: ApplicationErrorCode.BAD_REQUEST,
    FollowError.CANNOT_UNFOLLOW_SELF: ApplicationErrorCode.BAD_REQUEST,
    FollowError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    FollowError.ALREADY_FOLLOWING: ApplicationErrorCode.CONFLICT,
    FollowError.NOT_FOLLOWING: ApplicationErrorCode.BAD_REQUEST,
    SocialQueryError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}


def _error(error: str, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_handler_error(error, request, _SOCIAL_ERROR_CODES)


# =============================================================================
# Follow
# =============================================================================


async def follow_user(
    request: Request,
    current_user: AuthenticatedUser,
    user_id: UUID,
    handler: FollowUserHandler = Depends(get_follow_user_handler),
) -> MessageResponse | JSONResponse:
    """Follow a member.

    POST /api/v1/users/{user_id}/follow → 201 Created

    The followed member receives a FOLLOW notification.
    """
    result = await handler.handle(
        FollowUser(
            follower_id=current_user.user_id,
            follower_username=current_user.username,
            following_id=user_id,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return MessageResponse(message="User followed")


async def unfollow_user(
    request: Request,
    current_user: AuthenticatedUser,
    user_id: UUID,
    handler: UnfollowUserHandler = Depends(get_unfollow_user_handler),
) -> Response:
    """DELETE /api/v1/users/{user_id}/follow → 204 No Content"""
    result = await handler.handle(
        UnfollowUser(follower_id=current_user.user_id, following_id=user_id)
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def get_follow_status(
    current_user: AuthenticatedUser,
    user_id: UUID,
    handler: IsFollowingHandler = Depends(get_is_following_handler),
) -> FollowStatusResponse:
    """GET /api/v1/users/{user_id}/follow → 200 OK"""
    result = await handler.handle(
        IsFollowing(follower_id=current_user.user_id, following_id=user_id)
    )
    return FollowStatusResponse(is_following=bool(result.value))  # type: ignore[union-attr]


# =============================================================================
# Graph queries
# =============================================================================


async def get_social_stats(
    request: Request,
    user_id: UUID,
    handler: GetSocialStatsHandler = Depends(get_social_stats_handler),
) -> SocialStatsResponse | JSONResponse:
    """Counters for a member.

    GET /api/v1/users/{user_id}/stats → 200 OK

    ``reviews_count`` and ``likes_received`` only count published reviews.
    """
    result = await handler.handle(GetSocialStats(user_id=user_id))

    if isinstance(result, Failure):
        return _error(result.error, request)

    return SocialStatsResponse.from_dto(result.value)


async def get_mutual_follows(
    request: Request,
    current_user: AuthenticatedUser,
    user_id: UUID,
    handler: GetMutualFollowsHandler = Depends(get_mutual_follows_handler),
) -> MutualFollowsResponse | JSONResponse:
    """GET /api/v1/users/{user_id}/mutual → 200 OK"""
    result = await handler.handle(
        GetMutualFollows(user_id=current_user.user_id, other_id=user_id)
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return MutualFollowsResponse(user_ids=result.value, count=len(result.value))


async def suggest_follows(
    current_user: AuthenticatedUser,
    limit: int = Query(10, ge=1, le=50),
    handler: SuggestFollowsHandler = Depends(get_suggest_follows_handler),
) -> list[FollowSuggestionResponse]:
    """Suggest members followed by the people the caller follows.

    GET /api/v1/users/suggestions → 200 OK

    Ranked by the number of mutual connections.
    """
    result = await handler.handle(
        SuggestFollows(user_id=current_user.user_id, limit=limit)
    )
    return [
        FollowSuggestionResponse.from_dto(suggestion)
        for suggestion in result.value  # type: ignore[union-attr]
    ]


async def get_feed(
    current_user: AuthenticatedUser,
    activity_type: ActivityType | None = Query(None, alias="type"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=50),
    handler: GetFeedHandler = Depends(get_feed_handler),
) -> PaginatedResponse[ActivityResponse]:
    """Activity of the caller and everyone they follow, newest first.

    GET /api/v1/feed → 200 OK
    """
    result = await handler.handle(
        GetFeed(
            user_id=current_user.user_id,
            type=activity_type,
            page=page,
            limit=limit,
        )
    )
    feed = result.value  # type: ignore[union-attr]
    return PaginatedResponse[ActivityResponse](
        items=[ActivityResponse.from_dto(activity) for activity in feed.items],
        meta=PaginationMeta.from_page(feed),
    )
