"""Users resource router.

Endpoints:
    GET    /api/v1/users                                - List members
    GET    /api/v1/users/profile/{username}             - Profile page
    GET    /api/v1/users/profile/{username}/followers   - Followers
    GET    /api/v1/users/profile/{username}/following   - Followed members
    PATCH  /api/v1/users/profile                        - Update own profile
    PATCH  /api/v1/users/{user_id}/role                 - Change role (admin)
    DELETE /api/v1/users/{user_id}                      - Delete user (admin)
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.user_handlers import (
    ChangeUserRoleHandler,
    DeleteUserHandler,
    UpdateProfileHandler,
    UserCommandError,
)
from src.application.commands.user_commands import (
    ChangeUserRole,
    DeleteUser,
    UpdateProfile,
)
from src.application.dtos.pagination import Page
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.user_handlers import (
    GetUserProfileHandler,
    ListFollowersHandler,
    ListFollowingHandler,
    ListUsersHandler,
    UserQueryError,
)
from src.application.queries.user_queries import (
    GetUserProfile,
    ListFollowers,
    ListFollowing,
    ListUsers,
)
from src.core.container import (
    get_change_user_role_handler,
    get_delete_user_handler,
    get_get_user_profile_handler,
    get_list_followers_handler,
    get_list_following_handler,
    get_list_users_handler,
    get_update_profile_handler,
)
from src.core.result import Failure
from src.domain.entities.user import User
from src.presentation.routers.api.middleware.auth_dependencies import (
    AdminUser,
    AuthenticatedUser,
    OptionalUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import UserResponse
from src.schemas.common_schemas import PaginatedResponse, PaginationMeta
from src.schemas.user_schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    RoleUpdateRequest,
    UserSummaryResponse,
)

_USER_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    UserCommandError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    UserQueryError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}


def _summaries(page: Page[User]) -> PaginatedResponse[UserSummaryResponse]:
    return PaginatedResponse[UserSummaryResponse](
        items=[UserSummaryResponse.from_entity(user) for user in page.items],
        meta=PaginationMeta.from_page(page),
    )


async def list_users(
    search: str | None = Query(None, max_length=100),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> PaginatedResponse[UserSummaryResponse]:
    """List members, newest first.

    GET /api/v1/users → 200 OK

    ``search`` matches username or display name, case-insensitively.
    """
    result = await handler.handle(ListUsers(search=search, page=page, limit=limit))
    return _summaries(result.value)  # type: ignore[union-attr]


async def get_profile(
    request: Request,
    username: str,
    current_user: OptionalUser,
    handler: GetUserProfileHandler = Depends(get_get_user_profile_handler),
) -> ProfileResponse | JSONResponse:
    """Get a member's profile page.

    GET /api/v1/users/profile/{username} → 200 OK

    Private profiles viewed by anyone but their owner are limited.
    """
    result = await handler.handle(
        GetUserProfile(
            username=username,
            viewer_id=current_user.user_id if current_user else None,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return ProfileResponse.from_dto(result.value)


async def list_followers(
    request: Request,
    username: str,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    handler: ListFollowersHandler = Depends(get_list_followers_handler),
) -> PaginatedResponse[UserSummaryResponse] | JSONResponse:
    """GET /api/v1/users/profile/{username}/followers → 200 OK"""
    result = await handler.handle(
        ListFollowers(username=username, page=page, limit=limit)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return _summaries(result.value)


async def list_following(
    request: Request,
    username: str,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    handler: ListFollowingHandler = Depends(get_list_following_handler),
) -> PaginatedResponse[UserSummaryResponse] | JSONResponse:
    """GET /api/v1/users/profile/{username}/following → 200 OK"""
    result = await handler.handle(
        ListFollowing(username=username, page=page, limit=limit)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return _summaries(result.value)


async def update_profile(
    request: Request,
    current_user: AuthenticatedUser,
    data: ProfileUpdateRequest,
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
) -> UserResponse | JSONResponse:
    """Update the caller's own profile.

    PATCH /api/v1/users/profile → 200 OK

    Only fields present in the request body are changed.
    """
    result = await handler.handle(
        UpdateProfile(
            user_id=current_user.user_id,
            changes=data.model_dump(exclude_unset=True),
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return UserResponse.from_entity(result.value)


async def change_role(
    request: Request,
    current_user: AdminUser,
    user_id: UUID,
    data: RoleUpdateRequest,
    handler: ChangeUserRoleHandler = Depends(get_change_user_role_handler),
) -> UserResponse | JSONResponse:
    """PATCH /api/v1/users/{user_id}/role → 200 OK (admin only)"""
    result = await handler.handle(ChangeUserRole(user_id=user_id, role=data.role))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return UserResponse.from_entity(result.value)


async def delete_user(
    request: Request,
    current_user: AdminUser,
    user_id: UUID,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    """Delete a user and everything they own (admin only).

    DELETE /api/v1/users/{user_id} → 204 No Content
    """
    result = await handler.handle(DeleteUser(user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _USER_ERROR_CODES
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
