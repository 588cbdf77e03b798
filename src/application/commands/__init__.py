"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, FollowUser).

Each command has a corresponding handler in ``handlers/`` that contains the
orchestration logic.
"""

from src.application.commands.auth_commands import (
    AuthenticateUser,
    ChangePassword,
    ConfirmPasswordReset,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
)
from src.application.commands.game_commands import (
    CreateCatalogEntry,
    CreateGame,
    DeleteGame,
    UpdateGame,
)
from src.application.commands.game_list_commands import (
    AddGameListEntry,
    CreateGameList,
    DeleteGameList,
    RemoveGameListEntry,
    UpdateGameList,
)
from src.application.commands.notification_commands import (
    MarkAllNotificationsRead,
    MarkNotificationRead,
)
from src.application.commands.review_commands import (
    AddComment,
    CreateReview,
    DeleteComment,
    DeleteReview,
    LikeReview,
    UnlikeReview,
    UpdateReview,
)
from src.application.commands.social_commands import FollowUser, UnfollowUser
from src.application.commands.user_commands import (
    ChangeUserRole,
    DeleteUser,
    UpdateProfile,
)

__all__ = [
    # Auth
    "AuthenticateUser",
    "ChangePassword",
    "ConfirmPasswordReset",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    # Users
    "ChangeUserRole",
    "DeleteUser",
    "UpdateProfile",
    # Games
    "CreateCatalogEntry",
    "CreateGame",
    "DeleteGame",
    "UpdateGame",
    # Reviews
    "AddComment",
    "CreateReview",
    "DeleteComment",
    "DeleteReview",
    "LikeReview",
    "UnlikeReview",
    "UpdateReview",
    # Social
    "FollowUser",
    "UnfollowUser",
    # Game lists
    "AddGameListEntry",
    "CreateGameList",
    "DeleteGameList",
    "RemoveGameListEntry",
    "UpdateGameList",
    # Notifications
    "MarkAllNotificationsRead",
    "MarkNotificationRead",
]
