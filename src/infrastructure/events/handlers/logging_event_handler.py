"""Logging event handler for domain events.

Structured logging for authentication workflows and community actions.

Log Levels:
    - INFO: ATTEMPTED and SUCCEEDED events, social facts
    - WARNING: FAILED events (operational issues requiring attention)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - user_id / email: when available
    - reason: for FAILED events

Security:
    - Reset tokens carried by PasswordResetRequestSucceeded are never logged.

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(UserLoginFailed, logging_handler.handle_user_login_failed)
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
from src.domain.events.social_events import (
    CommentAdded,
    ReviewDeleted,
    ReviewLiked,
    ReviewPublished,
    UserFollowed,
    UserUnfollowed,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # User Registration
    # =========================================================================

    async def handle_user_registration_attempted(
        self,
        event: UserRegistrationAttempted,
    ) -> None:
        self._logger.info(
            "user_registration_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            username=event.username,
        )

    async def handle_user_registration_succeeded(
        self,
        event: UserRegistrationSucceeded,
    ) -> None:
        self._logger.info(
            "user_registration_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            email=event.email,
            username=event.username,
        )

    async def handle_user_registration_failed(
        self,
        event: UserRegistrationFailed,
    ) -> None:
        self._logger.warning(
            "user_registration_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            reason=event.reason,
        )

    # =========================================================================
    # Login / Logout
    # =========================================================================

    async def handle_user_login_attempted(self, event: UserLoginAttempted) -> None:
        self._logger.info(
            "user_login_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
        )

    async def handle_user_login_succeeded(self, event: UserLoginSucceeded) -> None:
        self._logger.info(
            "user_login_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            email=event.email,
            session_id=str(event.session_id),
        )

    async def handle_user_login_failed(self, event: UserLoginFailed) -> None:
        """Log failed login (WARNING level).

        The reason distinguishes unknown email from wrong password. It is
        only logged; clients always see "Invalid credentials".
        """
        self._logger.warning(
            "user_login_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            reason=event.reason,
        )

    async def handle_user_logout_succeeded(self, event: UserLogoutSucceeded) -> None:
        self._logger.info(
            "user_logout_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id) if event.user_id else None,
            session_revoked=event.session_revoked,
        )

    # =========================================================================
    # Token Refresh
    # =========================================================================

    async def handle_auth_token_refresh_attempted(
        self,
        event: AuthTokenRefreshAttempted,
    ) -> None:
        self._logger.info(
            "auth_token_refresh_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
        )

    async def handle_auth_token_refresh_succeeded(
        self,
        event: AuthTokenRefreshSucceeded,
    ) -> None:
        self._logger.info(
            "auth_token_refresh_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            old_session_id=str(event.old_session_id),
            new_session_id=str(event.new_session_id),
        )

    async def handle_auth_token_refresh_failed(
        self,
        event: AuthTokenRefreshFailed,
    ) -> None:
        self._logger.warning(
            "auth_token_refresh_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            reason=event.reason,
        )

    # =========================================================================
    # Password Change
    # =========================================================================

    async def handle_user_password_change_attempted(
        self,
        event: UserPasswordChangeAttempted,
    ) -> None:
        self._logger.info(
            "user_password_change_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )

    async def handle_user_password_change_succeeded(
        self,
        event: UserPasswordChangeSucceeded,
    ) -> None:
        self._logger.info(
            "user_password_change_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            sessions_revoked=event.sessions_revoked,
        )

    async def handle_user_password_change_failed(
        self,
        event: UserPasswordChangeFailed,
    ) -> None:
        self._logger.warning(
            "user_password_change_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            reason=event.reason,
        )

    # =========================================================================
    # Password Reset
    # =========================================================================

    async def handle_password_reset_request_attempted(
        self,
        event: PasswordResetRequestAttempted,
    ) -> None:
        self._logger.info(
            "password_reset_request_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
        )

    async def handle_password_reset_request_succeeded(
        self,
        event: PasswordResetRequestSucceeded,
    ) -> None:
        self._logger.info(
            "password_reset_request_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            email=event.email,
            expires_at=event.expires_at.isoformat(),
        )

    async def handle_password_reset_request_failed(
        self,
        event: PasswordResetRequestFailed,
    ) -> None:
        self._logger.warning(
            "password_reset_request_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            reason=event.reason,
        )

    async def handle_password_reset_confirm_attempted(
        self,
        event: PasswordResetConfirmAttempted,
    ) -> None:
        self._logger.info(
            "password_reset_confirm_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
        )

    async def handle_password_reset_confirm_succeeded(
        self,
        event: PasswordResetConfirmSucceeded,
    ) -> None:
        self._logger.info(
            "password_reset_confirm_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            sessions_revoked=event.sessions_revoked,
        )

    async def handle_password_reset_confirm_failed(
        self,
        event: PasswordResetConfirmFailed,
    ) -> None:
        self._logger.warning(
            "password_reset_confirm_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            reason=event.reason,
        )

    # =========================================================================
    # Community
    # =========================================================================

    async def handle_user_followed(self, event: UserFollowed) -> None:
        self._logger.info(
            "user_followed",
            event_id=str(event.event_id),
            follower_id=str(event.follower_id),
            following_id=str(event.following_id),
        )

    async def handle_user_unfollowed(self, event: UserUnfollowed) -> None:
        self._logger.info(
            "user_unfollowed",
            event_id=str(event.event_id),
            follower_id=str(event.follower_id),
            following_id=str(event.following_id),
        )

    async def handle_review_published(self, event: ReviewPublished) -> None:
        self._logger.info(
            "review_published",
            event_id=str(event.event_id),
            review_id=str(event.review_id),
            user_id=str(event.user_id),
            game_id=str(event.game_id),
            rating=event.rating,
            is_published=event.is_published,
        )

    async def handle_review_deleted(self, event: ReviewDeleted) -> None:
        self._logger.info(
            "review_deleted",
            event_id=str(event.event_id),
            review_id=str(event.review_id),
            game_id=str(event.game_id),
            deleted_by=str(event.deleted_by),
        )

    async def handle_review_liked(self, event: ReviewLiked) -> None:
        self._logger.info(
            "review_liked",
            event_id=str(event.event_id),
            review_id=str(event.review_id),
            liker_id=str(event.liker_id),
        )

    async def handle_comment_added(self, event: CommentAdded) -> None:
        self._logger.info(
            "comment_added",
            event_id=str(event.event_id),
            comment_id=str(event.comment_id),
            review_id=str(event.review_id),
            commenter_id=str(event.commenter_id),
        )
