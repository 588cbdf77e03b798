"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all API
endpoints. The registry is used to generate FastAPI routes, auth
dependencies and OpenAPI metadata when the v1 router is built.

Registry structure:
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Paths are relative to the ``/api/v1`` prefix
    - Auth policies explicitly declared (PUBLIC, OPTIONAL, AUTHENTICATED, ADMIN)

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1 import (
    auth,
    catalog,
    comments,
    game_lists,
    games,
    notifications,
    reviews,
    social,
    users,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.auth_schemas import (
    AuthResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
    UserResponse,
)
from src.schemas.common_schemas import MessageResponse, PaginatedResponse
from src.schemas.game_list_schemas import GameListEntryResponse, GameListResponse
from src.schemas.game_schemas import (
    DeveloperResponse,
    GameDetailResponse,
    GameResponse,
    GenreResponse,
    PlatformResponse,
    PublisherResponse,
)
from src.schemas.notification_schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
)
from src.schemas.review_schemas import CommentResponse, ReviewResponse
from src.schemas.user_schemas import (
    ActivityResponse,
    FollowStatusResponse,
    FollowSuggestionResponse,
    MutualFollowsResponse,
    ProfileResponse,
    SocialStatsResponse,
    UserSummaryResponse,
)

_PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
_OPTIONAL = AuthPolicy(
    level=AuthLevel.OPTIONAL,
    rationale="Response depends on the viewer when a token is presented",
)
_AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)
_ADMIN = AuthPolicy(level=AuthLevel.ADMIN)

_UNAUTHORIZED = ErrorSpec(status=401, description="Not authenticated")
_FORBIDDEN_ADMIN = ErrorSpec(status=403, description="Insufficient permissions")


def _catalog_routes(
    path: str,
    resource: str,
    list_handler: object,
    create_handler: object,
    response_model: object,
) -> list[RouteMetadata]:
    title = resource.replace("_", " ")
    return [
        RouteMetadata(
            method=HTTPMethod.GET,
            path=path,
            handler=list_handler,  # type: ignore[arg-type]
            resource=resource,
            tags=["Catalog"],
            summary=f"List {title}",
            description=f"All {title}, ordered by name.",
            operation_id=f"list_{resource}",
            response_model=list[response_model],  # type: ignore[valid-type]
            status_code=200,
            idempotency=IdempotencyLevel.SAFE,
            auth_policy=_PUBLIC,
        ),
        RouteMetadata(
            method=HTTPMethod.POST,
            path=path,
            handler=create_handler,  # type: ignore[arg-type]
            resource=resource,
            tags=["Catalog"],
            summary=f"Create {title[:-1]}",
            description="Slug is derived from the name and must be unique.",
            operation_id=f"create_{resource[:-1]}",
            response_model=response_model,
            status_code=201,
            errors=[
                _UNAUTHORIZED,
                _FORBIDDEN_ADMIN,
                ErrorSpec(status=409, description="An entry with this name already exists"),
            ],
            idempotency=IdempotencyLevel.NON_IDEMPOTENT,
            auth_policy=_ADMIN,
        ),
    ]


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=auth.register,
        resource="auth",
        tags=["Auth"],
        summary="Register",
        description="Create an account and sign in. Sets auth cookies.",
        operation_id="register",
        response_model=AuthResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=409, description="Email already registered or username taken"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/login",
        handler=auth.login,
        resource="auth",
        tags=["Auth"],
        summary="Login",
        description="Authenticate with email and password. Sets auth cookies.",
        operation_id="login",
        response_model=AuthResponse,
        status_code=200,
        errors=[ErrorSpec(status=401, description="Invalid credentials")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/refresh",
        handler=auth.refresh,
        resource="auth",
        tags=["Auth"],
        summary="Refresh tokens",
        description="Rotate the refresh token (body or refreshToken cookie).",
        operation_id="refresh_tokens",
        response_model=AuthResponse,
        status_code=200,
        errors=[ErrorSpec(status=401, description="Invalid refresh token")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.PUBLIC,
            rationale="Authenticated by the refresh token, not the access token",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/logout",
        handler=auth.logout,
        resource="auth",
        tags=["Auth"],
        summary="Logout",
        description="Revoke the presented refresh token and clear auth cookies.",
        operation_id="logout",
        response_model=None,
        status_code=204,
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.OPTIONAL,
            rationale="Logout must succeed with an expired access token",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/me",
        handler=auth.get_me,
        resource="auth",
        tags=["Auth"],
        summary="Current user",
        operation_id="get_me",
        response_model=UserResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/change-password",
        handler=auth.change_password,
        resource="auth",
        tags=["Auth"],
        summary="Change password",
        description="Change password and revoke all refresh tokens.",
        operation_id="change_password",
        response_model=MessageResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Current password is incorrect"),
            _UNAUTHORIZED,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/forgot-password",
        handler=auth.forgot_password,
        resource="auth",
        tags=["Auth"],
        summary="Request password reset",
        description="Email a reset link. The response never reveals whether the email exists.",
        operation_id="forgot_password",
        response_model=ForgotPasswordResponse,
        status_code=202,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/reset-password",
        handler=auth.reset_password,
        resource="auth",
        tags=["Auth"],
        summary="Reset password",
        description="Set a new password with a reset token. Revokes all refresh tokens.",
        operation_id="reset_password",
        response_model=ResetPasswordResponse,
        status_code=200,
        errors=[ErrorSpec(status=400, description="Invalid or expired reset token")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_PUBLIC,
    ),
    # =========================================================================
    # Users Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=users.list_users,
        resource="users",
        tags=["Users"],
        summary="List users",
        description="Members, newest first. Optional search on username and display name.",
        operation_id="list_users",
        response_model=PaginatedResponse[UserSummaryResponse],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/profile",
        handler=users.update_profile,
        resource="users",
        tags=["Users"],
        summary="Update profile",
        description="Partially update the caller's own profile.",
        operation_id="update_profile",
        response_model=UserResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/profile/{username}",
        handler=users.get_profile,
        resource="users",
        tags=["Users"],
        summary="Get profile",
        description="Profile with stats, recent reviews and lists. Limited for private profiles.",
        operation_id="get_profile",
        response_model=ProfileResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_OPTIONAL,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/profile/{username}/followers",
        handler=users.list_followers,
        resource="users",
        tags=["Users"],
        summary="List followers",
        operation_id="list_followers",
        response_model=PaginatedResponse[UserSummaryResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/profile/{username}/following",
        handler=users.list_following,
        resource="users",
        tags=["Users"],
        summary="List followed users",
        operation_id="list_following",
        response_model=PaginatedResponse[UserSummaryResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/suggestions",
        handler=social.suggest_follows,
        resource="users",
        tags=["Social"],
        summary="Follow suggestions",
        description="Members followed by people the caller follows, by mutual connections.",
        operation_id="suggest_follows",
        response_model=list[FollowSuggestionResponse],
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/users/{user_id}/role",
        handler=users.change_role,
        resource="users",
        tags=["Users"],
        summary="Change user role",
        operation_id="change_user_role",
        response_model=UserResponse,
        status_code=200,
        errors=[
            _UNAUTHORIZED,
            _FORBIDDEN_ADMIN,
            ErrorSpec(status=404, description="User not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{user_id}",
        handler=users.delete_user,
        resource="users",
        tags=["Users"],
        summary="Delete user",
        description="Delete a user together with their reviews, lists and follows.",
        operation_id="delete_user",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            _FORBIDDEN_ADMIN,
            ErrorSpec(status=404, description="User not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ADMIN,
    ),
    # =========================================================================
    # Social Graph
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/users/{user_id}/follow",
        handler=social.follow_user,
        resource="follows",
        tags=["Social"],
        summary="Follow user",
        operation_id="follow_user",
        response_model=MessageResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="You cannot follow yourself"),
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="User not found"),
            ErrorSpec(status=409, description="You are already following this user"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/users/{user_id}/follow",
        handler=social.unfollow_user,
        resource="follows",
        tags=["Social"],
        summary="Unfollow user",
        operation_id="unfollow_user",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=400, description="You are not following this user"),
            _UNAUTHORIZED,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/follow",
        handler=social.get_follow_status,
        resource="follows",
        tags=["Social"],
        summary="Follow status",
        operation_id="get_follow_status",
        response_model=FollowStatusResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/stats",
        handler=social.get_social_stats,
        resource="follows",
        tags=["Social"],
        summary="Social stats",
        operation_id="get_social_stats",
        response_model=SocialStatsResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/mutual",
        handler=social.get_mutual_follows,
        resource="follows",
        tags=["Social"],
        summary="Mutual follows",
        description="Members followed by both the caller and this user.",
        operation_id="get_mutual_follows",
        response_model=MutualFollowsResponse,
        status_code=200,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="User not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/feed",
        handler=social.get_feed,
        resource="feed",
        tags=["Social"],
        summary="Activity feed",
        description="Reviews and follows by the caller and the people they follow.",
        operation_id="get_feed",
        response_model=PaginatedResponse[ActivityResponse],
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Games Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/games",
        handler=games.list_games,
        resource="games",
        tags=["Games"],
        summary="List games",
        description="Filter, sort and paginate the catalog.",
        operation_id="list_games",
        response_model=PaginatedResponse[GameResponse],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/games",
        handler=games.create_game,
        resource="games",
        tags=["Games"],
        summary="Create game",
        operation_id="create_game",
        response_model=GameResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Unknown developer, publisher, genre or platform"),
            _UNAUTHORIZED,
            _FORBIDDEN_ADMIN,
            ErrorSpec(status=409, description="Game with this title already exists"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/games/{slug}",
        handler=games.get_game,
        resource="games",
        tags=["Games"],
        summary="Get game",
        description="Game detail with catalog references and the latest reviews.",
        operation_id="get_game",
        response_model=GameDetailResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Game not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/games/{game_id}/similar",
        handler=games.list_similar_games,
        resource="games",
        tags=["Games"],
        summary="Similar games",
        description="Games sharing a genre, best rated first.",
        operation_id="list_similar_games",
        response_model=list[GameResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="Game not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/games/{game_id}",
        handler=games.update_game,
        resource="games",
        tags=["Games"],
        summary="Update game",
        description="A title change regenerates the slug.",
        operation_id="update_game",
        response_model=GameResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Unknown developer, publisher, genre or platform"),
            _UNAUTHORIZED,
            _FORBIDDEN_ADMIN,
            ErrorSpec(status=404, description="Game not found"),
            ErrorSpec(status=409, description="Game with this title already exists"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ADMIN,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/games/{game_id}",
        handler=games.delete_game,
        resource="games",
        tags=["Games"],
        summary="Delete game",
        operation_id="delete_game",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            _FORBIDDEN_ADMIN,
            ErrorSpec(status=404, description="Game not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_ADMIN,
    ),
    # =========================================================================
    # Catalog Resources
    # =========================================================================
    *_catalog_routes(
        "/developers",
        "developers",
        catalog.list_developers,
        catalog.create_developer,
        DeveloperResponse,
    ),
    *_catalog_routes(
        "/publishers",
        "publishers",
        catalog.list_publishers,
        catalog.create_publisher,
        PublisherResponse,
    ),
    *_catalog_routes(
        "/genres",
        "genres",
        catalog.list_genres,
        catalog.create_genre,
        GenreResponse,
    ),
    *_catalog_routes(
        "/platforms",
        "platforms",
        catalog.list_platforms,
        catalog.create_platform,
        PlatformResponse,
    ),
    # =========================================================================
    # Reviews Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews",
        handler=reviews.list_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List reviews",
        description="Published reviews; authors also see their own drafts when filtering by user_id.",
        operation_id="list_reviews",
        response_model=PaginatedResponse[ReviewResponse],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_OPTIONAL,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews",
        handler=reviews.create_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Create review",
        operation_id="create_review",
        response_model=ReviewResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Game not found"),
            _UNAUTHORIZED,
            ErrorSpec(status=409, description="You have already reviewed this game"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/{review_id}",
        handler=reviews.get_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Get review",
        operation_id="get_review",
        response_model=ReviewResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=403, description="This review is not published"),
            ErrorSpec(status=404, description="Review not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_OPTIONAL,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/reviews/{review_id}",
        handler=reviews.update_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Update review",
        operation_id="update_review",
        response_model=ReviewResponse,
        status_code=200,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only update your own reviews"),
            ErrorSpec(status=404, description="Review not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/reviews/{review_id}",
        handler=reviews.delete_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Delete review",
        operation_id="delete_review",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only delete your own reviews"),
            ErrorSpec(status=404, description="Review not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews/{review_id}/likes",
        handler=reviews.like_review,
        resource="likes",
        tags=["Reviews"],
        summary="Like review",
        operation_id="like_review",
        response_model=MessageResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Cannot like an unpublished review"),
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Review not found"),
            ErrorSpec(status=409, description="You have already liked this review"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/reviews/{review_id}/likes",
        handler=reviews.unlike_review,
        resource="likes",
        tags=["Reviews"],
        summary="Unlike review",
        operation_id="unlike_review",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=400, description="You have not liked this review"),
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Review not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Comments Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reviews/{review_id}/comments",
        handler=comments.list_comments,
        resource="comments",
        tags=["Comments"],
        summary="List comments",
        description="Comments on a review, oldest first.",
        operation_id="list_comments",
        response_model=PaginatedResponse[CommentResponse],
        status_code=200,
        errors=[ErrorSpec(status=404, description="Review not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews/{review_id}/comments",
        handler=comments.add_comment,
        resource="comments",
        tags=["Comments"],
        summary="Add comment",
        operation_id="add_comment",
        response_model=CommentResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Cannot comment on an unpublished review"),
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Review not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/comments/{comment_id}",
        handler=comments.delete_comment,
        resource="comments",
        tags=["Comments"],
        summary="Delete comment",
        operation_id="delete_comment",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only delete your own comments"),
            ErrorSpec(status=404, description="Comment not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Game Lists Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/game-lists",
        handler=game_lists.list_game_lists,
        resource="game_lists",
        tags=["Game Lists"],
        summary="List game lists",
        description="A member's lists. Non-owners see public lists only.",
        operation_id="list_game_lists",
        response_model=list[GameListResponse],
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_OPTIONAL,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/game-lists",
        handler=game_lists.create_game_list,
        resource="game_lists",
        tags=["Game Lists"],
        summary="Create game list",
        operation_id="create_game_list",
        response_model=GameListResponse,
        status_code=201,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/game-lists/{list_id}",
        handler=game_lists.get_game_list,
        resource="game_lists",
        tags=["Game Lists"],
        summary="Get game list",
        operation_id="get_game_list",
        response_model=GameListResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Game list not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_OPTIONAL,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/game-lists/{list_id}",
        handler=game_lists.update_game_list,
        resource="game_lists",
        tags=["Game Lists"],
        summary="Update game list",
        operation_id="update_game_list",
        response_model=GameListResponse,
        status_code=200,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only modify your own game lists"),
            ErrorSpec(status=404, description="Game list not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/game-lists/{list_id}",
        handler=game_lists.delete_game_list,
        resource="game_lists",
        tags=["Game Lists"],
        summary="Delete game list",
        operation_id="delete_game_list",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only modify your own game lists"),
            ErrorSpec(status=404, description="Game list not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/game-lists/{list_id}/entries",
        handler=game_lists.add_game_list_entry,
        resource="game_list_entries",
        tags=["Game Lists"],
        summary="Add game to list",
        description="Appended at the end unless an explicit order is given.",
        operation_id="add_game_list_entry",
        response_model=GameListEntryResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Game not found"),
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only modify your own game lists"),
            ErrorSpec(status=404, description="Game list not found"),
            ErrorSpec(status=409, description="Game already in list"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/game-lists/{list_id}/entries/{game_id}",
        handler=game_lists.remove_game_list_entry,
        resource="game_list_entries",
        tags=["Game Lists"],
        summary="Remove game from list",
        operation_id="remove_game_list_entry",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="You can only modify your own game lists"),
            ErrorSpec(status=404, description="Game list not found or game not in list"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Notifications Resource
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/notifications",
        handler=notifications.list_notifications,
        resource="notifications",
        tags=["Notifications"],
        summary="List notifications",
        operation_id="list_notifications",
        response_model=NotificationListResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/notifications/{notification_id}/read",
        handler=notifications.mark_notification_read,
        resource="notifications",
        tags=["Notifications"],
        summary="Mark notification read",
        operation_id="mark_notification_read",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="Notification not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/notifications/read-all",
        handler=notifications.mark_all_notifications_read,
        resource="notifications",
        tags=["Notifications"],
        summary="Mark all notifications read",
        operation_id="mark_all_notifications_read",
        response_model=MarkAllReadResponse,
        status_code=200,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
]
