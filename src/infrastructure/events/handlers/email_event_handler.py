"""Email event handler stub for domain events.

STUB: logs when emails would be sent. Provides the seam for a real mail
service later.

Email Templates:
    - password_reset_email: after PasswordResetRequestSucceeded
      (link: ``{password_reset_url_base}?token=<token>``)
    - password_changed_email: after UserPasswordChangeSucceeded and
      PasswordResetConfirmSucceeded

Security:
    - The reset link contains the token, so it is never logged. Only the
      recipient and expiry are.

Usage:
    >>> email_handler = EmailEventHandler(logger=get_logger(), settings=get_settings())
    >>> event_bus.subscribe(
    ...     PasswordResetRequestSucceeded,
    ...     email_handler.handle_password_reset_request_succeeded,
    ... )
"""

from urllib.parse import urlencode

from src.core.config import Settings
from src.domain.events.auth_events import (
    PasswordResetConfirmSucceeded,
    PasswordResetRequestSucceeded,
    UserPasswordChangeSucceeded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class EmailEventHandler:
    """Event handler stub for email sending.

    Subscribes to SUCCEEDED events only (don't email on ATTEMPT or FAILURE).

    Attributes:
        _logger: Logger protocol implementation (from container).
        _settings: Application settings (reset page URL, app name).
    """

    def __init__(self, logger: LoggerProtocol, settings: Settings) -> None:
        self._logger = logger
        self._settings = settings

    def build_reset_link(self, token: str) -> str:
        """Frontend URL that receives the reset token as ``?token=``."""
        return f"{self._settings.password_reset_url_base}?{urlencode({'token': token})}"

    async def handle_password_reset_request_succeeded(
        self,
        event: PasswordResetRequestSucceeded,
    ) -> None:
        """Send password reset email (STUB).

        A real sender renders ``build_reset_link(event.reset_token)`` into
        the message body.

        Args:
            event: PasswordResetRequestSucceeded with email, token and expiry.
        """
        self._logger.info(
            "email_would_be_sent",
            template="password_reset_email",
            recipient=event.email,
            user_id=str(event.user_id),
            event_id=str(event.event_id),
            subject=f"Reset your {self._settings.app_name} password",
            reset_page=self._settings.password_reset_url_base,
            expires_at=event.expires_at.isoformat(),
        )

    async def handle_user_password_change_succeeded(
        self,
        event: UserPasswordChangeSucceeded,
    ) -> None:
        self._logger.info(
            "email_would_be_sent",
            template="password_changed_email",
            recipient=event.email,
            user_id=str(event.user_id),
            event_id=str(event.event_id),
            subject=f"Your {self._settings.app_name} password was changed",
        )

    async def handle_password_reset_confirm_succeeded(
        self,
        event: PasswordResetConfirmSucceeded,
    ) -> None:
        self._logger.info(
            "email_would_be_sent",
            template="password_changed_email",
            recipient=event.email,
            user_id=str(event.user_id),
            event_id=str(event.event_id),
            subject=f"Your {self._settings.app_name} password was reset",
        )
