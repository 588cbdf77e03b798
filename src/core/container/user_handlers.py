"""User and profile handler dependency factories.

Covers the member's own account (profile update), public profiles,
follower/following listings and the admin user-management commands.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.repositories import (
    get_follow_repository,
    get_game_list_repository,
    get_review_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.user_handlers import (
        ChangeUserRoleHandler,
        DeleteUserHandler,
        UpdateProfileHandler,
    )
    from src.application.queries.handlers.user_handlers import (
        GetCurrentUserHandler,
        GetUserProfileHandler,
        ListFollowersHandler,
        ListFollowingHandler,
        ListUsersHandler,
    )
    from src.infrastructure.persistence.repositories import (
        FollowRepository,
        GameListRepository,
        ReviewRepository,
        UserRepository,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


async def get_update_profile_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "UpdateProfileHandler":
    from src.application.commands.handlers.user_handlers import UpdateProfileHandler

    return UpdateProfileHandler(user_repo=user_repo)


async def get_change_user_role_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "ChangeUserRoleHandler":
    """Get ChangeUserRole command handler (request-scoped, admin only)."""
    from src.application.commands.handlers.user_handlers import ChangeUserRoleHandler

    return ChangeUserRoleHandler(user_repo=user_repo)


async def get_delete_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "DeleteUserHandler":
    """Get DeleteUser command handler (request-scoped, admin only)."""
    from src.application.commands.handlers.user_handlers import DeleteUserHandler

    return DeleteUserHandler(user_repo=user_repo)


# ============================================================================
# Query Handler Factories
# ============================================================================


async def get_get_current_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "GetCurrentUserHandler":
    from src.application.queries.handlers.user_handlers import GetCurrentUserHandler

    return GetCurrentUserHandler(user_repo=user_repo)


async def get_list_users_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "ListUsersHandler":
    from src.application.queries.handlers.user_handlers import ListUsersHandler

    return ListUsersHandler(user_repo=user_repo)


async def get_get_user_profile_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "GetUserProfileHandler":
    """Get GetUserProfile query handler (request-scoped).

    Profile assembly reads from four repositories; all of them share the
    request's database session.

    Returns:
        GetUserProfileHandler instance.
    """
    from src.application.queries.handlers.user_handlers import GetUserProfileHandler

    return GetUserProfileHandler(
        user_repo=user_repo,
        follow_repo=follow_repo,
        review_repo=review_repo,
        list_repo=list_repo,
    )


async def get_list_followers_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "ListFollowersHandler":
    from src.application.queries.handlers.user_handlers import ListFollowersHandler

    return ListFollowersHandler(user_repo=user_repo, follow_repo=follow_repo)


async def get_list_following_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "ListFollowingHandler":
    from src.application.queries.handlers.user_handlers import ListFollowingHandler

    return ListFollowingHandler(user_repo=user_repo, follow_repo=follow_repo)
