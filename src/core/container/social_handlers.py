"""Social graph, feed, game list and notification handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.events import get_event_bus
from src.core.container.repositories import (
    get_activity_repository,
    get_follow_repository,
    get_game_list_repository,
    get_game_repository,
    get_notification_repository,
    get_review_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.follow_handlers import (
        FollowUserHandler,
        UnfollowUserHandler,
    )
    from src.application.commands.handlers.game_list_handlers import (
        AddGameListEntryHandler,
        CreateGameListHandler,
        DeleteGameListHandler,
        RemoveGameListEntryHandler,
        UpdateGameListHandler,
    )
    from src.application.commands.handlers.notification_handlers import (
        MarkAllNotificationsReadHandler,
        MarkNotificationReadHandler,
    )
    from src.application.queries.handlers.game_list_handlers import (
        GetGameListHandler,
        ListGameListsHandler,
    )
    from src.application.queries.handlers.notification_handlers import (
        ListNotificationsHandler,
    )
    from src.application.queries.handlers.social_handlers import (
        GetFeedHandler,
        GetMutualFollowsHandler,
        GetSocialStatsHandler,
        IsFollowingHandler,
        SuggestFollowsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        ActivityRepository,
        FollowRepository,
        GameListRepository,
        GameRepository,
        NotificationRepository,
        ReviewRepository,
        UserRepository,
    )


# ============================================================================
# Follow Graph
# ============================================================================


async def get_follow_user_handler(
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "FollowUserHandler":
    """Get FollowUser command handler (request-scoped).

    Publishes UserFollowed, which NotificationEventHandler turns into a
    notification for the followed member.

    Returns:
        FollowUserHandler instance.
    """
    from src.application.commands.handlers.follow_handlers import FollowUserHandler

    return FollowUserHandler(
        follow_repo=follow_repo, user_repo=user_repo, event_bus=get_event_bus()
    )


async def get_unfollow_user_handler(
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "UnfollowUserHandler":
    from src.application.commands.handlers.follow_handlers import (
        UnfollowUserHandler,
    )

    return UnfollowUserHandler(follow_repo=follow_repo, event_bus=get_event_bus())


async def get_is_following_handler(
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "IsFollowingHandler":
    from src.application.queries.handlers.social_handlers import IsFollowingHandler

    return IsFollowingHandler(follow_repo=follow_repo)


async def get_feed_handler(
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
    activity_repo: "ActivityRepository" = Depends(get_activity_repository),
) -> "GetFeedHandler":
    """Get GetFeed query handler (request-scoped)."""
    from src.application.queries.handlers.social_handlers import GetFeedHandler

    return GetFeedHandler(follow_repo=follow_repo, activity_repo=activity_repo)


async def get_social_stats_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
    review_repo: "ReviewRepository" = Depends(get_review_repository),
) -> "GetSocialStatsHandler":
    from src.application.queries.handlers.social_handlers import (
        GetSocialStatsHandler,
    )

    return GetSocialStatsHandler(
        user_repo=user_repo, follow_repo=follow_repo, review_repo=review_repo
    )


async def get_mutual_follows_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "GetMutualFollowsHandler":
    from src.application.queries.handlers.social_handlers import (
        GetMutualFollowsHandler,
    )

    return GetMutualFollowsHandler(user_repo=user_repo, follow_repo=follow_repo)


async def get_suggest_follows_handler(
    follow_repo: "FollowRepository" = Depends(get_follow_repository),
) -> "SuggestFollowsHandler":
    from src.application.queries.handlers.social_handlers import (
        SuggestFollowsHandler,
    )

    return SuggestFollowsHandler(follow_repo=follow_repo)


# ============================================================================
# Game Lists
# ============================================================================


async def get_create_game_list_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "CreateGameListHandler":
    from src.application.commands.handlers.game_list_handlers import (
        CreateGameListHandler,
    )

    return CreateGameListHandler(list_repo=list_repo)


async def get_update_game_list_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "UpdateGameListHandler":
    from src.application.commands.handlers.game_list_handlers import (
        UpdateGameListHandler,
    )

    return UpdateGameListHandler(list_repo=list_repo)


async def get_delete_game_list_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "DeleteGameListHandler":
    from src.application.commands.handlers.game_list_handlers import (
        DeleteGameListHandler,
    )

    return DeleteGameListHandler(list_repo=list_repo)


async def get_add_game_list_entry_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "AddGameListEntryHandler":
    from src.application.commands.handlers.game_list_handlers import (
        AddGameListEntryHandler,
    )

    return AddGameListEntryHandler(list_repo=list_repo, game_repo=game_repo)


async def get_remove_game_list_entry_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "RemoveGameListEntryHandler":
    from src.application.commands.handlers.game_list_handlers import (
        RemoveGameListEntryHandler,
    )

    return RemoveGameListEntryHandler(list_repo=list_repo)


async def get_list_game_lists_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "ListGameListsHandler":
    from src.application.queries.handlers.game_list_handlers import (
        ListGameListsHandler,
    )

    return ListGameListsHandler(list_repo=list_repo)


async def get_get_game_list_handler(
    list_repo: "GameListRepository" = Depends(get_game_list_repository),
) -> "GetGameListHandler":
    from src.application.queries.handlers.game_list_handlers import (
        GetGameListHandler,
    )

    return GetGameListHandler(list_repo=list_repo)


# ============================================================================
# Notifications
# ============================================================================


async def get_list_notifications_handler(
    notification_repo: "NotificationRepository" = Depends(
        get_notification_repository
    ),
) -> "ListNotificationsHandler":
    from src.application.queries.handlers.notification_handlers import (
        ListNotificationsHandler,
    )

    return ListNotificationsHandler(notification_repo=notification_repo)


async def get_mark_notification_read_handler(
    notification_repo: "NotificationRepository" = Depends(
        get_notification_repository
    ),
) -> "MarkNotificationReadHandler":
    from src.application.commands.handlers.notification_handlers import (
        MarkNotificationReadHandler,
    )

    return MarkNotificationReadHandler(notification_repo=notification_repo)


async def get_mark_all_notifications_read_handler(
    notification_repo: "NotificationRepository" = Depends(
        get_notification_repository
    ),
) -> "MarkAllNotificationsReadHandler":
    from src.application.commands.handlers.notification_handlers import (
        MarkAllNotificationsReadHandler,
    )

    return MarkAllNotificationsReadHandler(notification_repo=notification_repo)
