"""Domain events module.

Usage:
    >>> from src.domain.events import UserFollowed
    >>> await event_bus.publish(UserFollowed(follower_id=a, follower_username="ana", following_id=b))
"""

from src.domain.events.auth_events import (
    AuthTokenRefreshAttempted,
    AuthTokenRefreshFailed,
    AuthTokenRefreshSucceeded,
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutSucceeded,
    UserPasswordChangeAttempted,
    UserPasswordChangeFailed,
    UserPasswordChangeSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.social_events import (
    CommentAdded,
    ReviewDeleted,
    ReviewLiked,
    ReviewPublished,
    UserFollowed,
    UserUnfollowed,
)

__all__ = [
    "DomainEvent",
    # Registration
    "UserRegistrationAttempted",
    "UserRegistrationSucceeded",
    "UserRegistrationFailed",
    # Login / logout
    "UserLoginAttempted",
    "UserLoginSucceeded",
    "UserLoginFailed",
    "UserLogoutSucceeded",
    # Token refresh
    "AuthTokenRefreshAttempted",
    "AuthTokenRefreshSucceeded",
    "AuthTokenRefreshFailed",
    # Password change / reset
    "UserPasswordChangeAttempted",
    "UserPasswordChangeSucceeded",
    "UserPasswordChangeFailed",
    "PasswordResetRequestAttempted",
    "PasswordResetRequestSucceeded",
    "PasswordResetRequestFailed",
    "PasswordResetConfirmAttempted",
    "PasswordResetConfirmSucceeded",
    "PasswordResetConfirmFailed",
    # Community
    "UserFollowed",
    "UserUnfollowed",
    "ReviewPublished",
    "ReviewDeleted",
    "ReviewLiked",
    "CommentAdded",
]
