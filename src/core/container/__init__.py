"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_database, get_user_repository, ...

The container is organized into modules by concern:
- infrastructure: Core services (db, security, logging)
- events: Event bus and registry-driven subscriptions
- repositories: Repository factories
- auth_handlers: Authentication handler factories
- user_handlers: Profile and user administration handler factories
- game_handlers: Game catalog handler factories
- review_handlers: Review, like and comment handler factories
- social_handlers: Follow graph, feed, game list and notification factories
"""

from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_reset_token_service,
    get_password_service,
    get_refresh_token_service,
    get_token_service,
)

from src.core.container.events import get_event_bus

from src.core.container.repositories import (
    get_activity_repository,
    get_catalog_repository,
    get_comment_repository,
    get_follow_repository,
    get_game_list_repository,
    get_game_repository,
    get_like_repository,
    get_notification_repository,
    get_review_repository,
    get_session_repository,
    get_user_repository,
)

from src.core.container.auth_handlers import (
    get_authenticate_user_handler,
    get_change_password_handler,
    get_confirm_password_reset_handler,
    get_logout_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
)

from src.core.container.user_handlers import (
    get_change_user_role_handler,
    get_delete_user_handler,
    get_get_current_user_handler,
    get_get_user_profile_handler,
    get_list_followers_handler,
    get_list_following_handler,
    get_list_users_handler,
    get_update_profile_handler,
)

from src.core.container.game_handlers import (
    get_create_catalog_entry_handler,
    get_create_game_handler,
    get_delete_game_handler,
    get_get_game_handler,
    get_list_catalog_entries_handler,
    get_list_games_handler,
    get_list_similar_games_handler,
    get_update_game_handler,
)

from src.core.container.review_handlers import (
    get_add_comment_handler,
    get_create_review_handler,
    get_delete_comment_handler,
    get_delete_review_handler,
    get_get_review_handler,
    get_like_review_handler,
    get_list_comments_handler,
    get_list_reviews_handler,
    get_unlike_review_handler,
    get_update_review_handler,
)

from src.core.container.social_handlers import (
    get_add_game_list_entry_handler,
    get_create_game_list_handler,
    get_delete_game_list_handler,
    get_feed_handler,
    get_follow_user_handler,
    get_get_game_list_handler,
    get_is_following_handler,
    get_list_game_lists_handler,
    get_list_notifications_handler,
    get_mark_all_notifications_read_handler,
    get_mark_notification_read_handler,
    get_mutual_follows_handler,
    get_remove_game_list_entry_handler,
    get_social_stats_handler,
    get_suggest_follows_handler,
    get_unfollow_user_handler,
    get_update_game_list_handler,
)

__all__ = [
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_reset_token_service",
    "get_password_service",
    "get_refresh_token_service",
    "get_token_service",
    "get_event_bus",
    "get_activity_repository",
    "get_catalog_repository",
    "get_comment_repository",
    "get_follow_repository",
    "get_game_list_repository",
    "get_game_repository",
    "get_like_repository",
    "get_notification_repository",
    "get_review_repository",
    "get_session_repository",
    "get_user_repository",
    "get_authenticate_user_handler",
    "get_change_password_handler",
    "get_confirm_password_reset_handler",
    "get_logout_user_handler",
    "get_refresh_access_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_change_user_role_handler",
    "get_delete_user_handler",
    "get_get_current_user_handler",
    "get_get_user_profile_handler",
    "get_list_followers_handler",
    "get_list_following_handler",
    "get_list_users_handler",
    "get_update_profile_handler",
    "get_create_catalog_entry_handler",
    "get_create_game_handler",
    "get_delete_game_handler",
    "get_get_game_handler",
    "get_list_catalog_entries_handler",
    "get_list_games_handler",
    "get_list_similar_games_handler",
    "get_update_game_handler",
    "get_add_comment_handler",
    "get_create_review_handler",
    "get_delete_comment_handler",
    "get_delete_review_handler",
    "get_get_review_handler",
    "get_like_review_handler",
    "get_list_comments_handler",
    "get_list_reviews_handler",
    "get_unlike_review_handler",
    "get_update_review_handler",
    "get_add_game_list_entry_handler",
    "get_create_game_list_handler",
    "get_delete_game_list_handler",
    "get_feed_handler",
    "get_follow_user_handler",
    "get_get_game_list_handler",
    "get_is_following_handler",
    "get_list_game_lists_handler",
    "get_list_notifications_handler",
    "get_mark_all_notifications_read_handler",
    "get_mark_notification_read_handler",
    "get_mutual_follows_handler",
    "get_remove_game_list_entry_handler",
    "get_social_stats_handler",
    "get_suggest_follows_handler",
    "get_unfollow_user_handler",
    "get_update_game_list_handler",
]
