"""Request password reset handler.

Flow:
1. Emit PasswordResetRequestAttempted event
2. Look up user by email (unknown email: emit Failed, still return Success)
3. Issue a signed reset token
4. Store its hash and expiry on the user, replacing any previous token
5. Emit PasswordResetRequestSucceeded event (EmailEventHandler sends link)

Security:
    - Always returns Success so callers cannot enumerate accounts
    - Only the hash of the token is stored
    - Overwriting the stored hash invalidates every earlier token
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.services.request_metadata import request_metadata
from src.core.result import Result, Success
from src.domain.events.auth_events import (
    PasswordResetRequestAttempted,
    PasswordResetRequestFailed,
    PasswordResetRequestSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordResetTokenServiceProtocol,
    UserRepository,
)


class PasswordResetRequestError:
    """Internal reasons (events only, never returned)."""

    USER_NOT_FOUND = "user_not_found"


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        reset_token_service: PasswordResetTokenServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._reset_token_service = reset_token_service
        self._event_bus = event_bus

    async def handle(self, cmd: RequestPasswordReset) -> Result[None, str]:
        """Handle password reset request.

        Returns:
            Success(None) always.
        """
        metadata = request_metadata(cmd.ip_address, cmd.user_agent)
        await self._event_bus.publish(
            PasswordResetRequestAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                email=cmd.email,
            ),
            metadata=metadata,
        )

        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            await self._event_bus.publish(
                PasswordResetRequestFailed(
                    event_id=uuid7(),
                    occurred_at=datetime.now(UTC),
                    email=cmd.email,
                    reason=PasswordResetRequestError.USER_NOT_FOUND,
                ),
                metadata=metadata,
            )
            return Success(value=None)

        issued = self._reset_token_service.issue_token(user.id)
        user.set_reset_token(issued.token_hash, issued.expires_at)
        await self._user_repo.update(user)

        await self._event_bus.publish(
            PasswordResetRequestSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                email=user.email,
                reset_token=issued.token,
                expires_at=issued.expires_at,
            ),
            metadata=metadata,
        )
        return Success(value=None)
