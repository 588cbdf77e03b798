"""Confirm password reset handler.

Flow:
1. Emit PasswordResetConfirmAttempted event
2. Decode token (signature, expiry, ``type == "reset"``)
3. Load user from the ``sub`` claim
4. Check a reset token is outstanding and unexpired on the user
5. Match the token against the stored hash
6. Set new password and clear the stored hash (single use)
7. Revoke all sessions
8. Emit PasswordResetConfirmSucceeded event

Every failure returns the same client-facing error; the precise reason only
goes to the Failed event.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import ConfirmPasswordReset
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    PasswordResetTokenServiceProtocol,
    SessionRepository,
    UserRepository,
)

PASSWORD_RESET_REASON = "password_reset"


class PasswordResetConfirmError:
    """Reset confirmation errors."""

    INVALID_OR_EXPIRED = "Invalid or expired reset token"

    # Internal reasons (events only)
    USER_NOT_FOUND = "user_not_found"
    NO_PENDING_TOKEN = "no_pending_token"
    TOKEN_SUPERSEDED = "token_superseded"


class ConfirmPasswordResetHandler:
    """Handler for ConfirmPasswordReset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        password_service: PasswordHashingProtocol,
        reset_token_service: PasswordResetTokenServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._password_service = password_service
        self._reset_token_service = reset_token_service
        self._event_bus = event_bus

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[None, str]:
        await self._event_bus.publish(
            PasswordResetConfirmAttempted(
                event_id=uuid7(), occurred_at=datetime.now(UTC)
            )
        )

        decoded = self._reset_token_service.decode_token(cmd.token)
        if isinstance(decoded, Failure):
            return await self._fail(decoded.error)

        user = await self._user_repo.find_by_id(decoded.value)
        if user is None:
            return await self._fail(PasswordResetConfirmError.USER_NOT_FOUND)

        if not user.has_valid_reset_token() or user.reset_token_hash is None:
            return await self._fail(PasswordResetConfirmError.NO_PENDING_TOKEN)

        if not self._reset_token_service.verify_token_hash(
            cmd.token, user.reset_token_hash
        ):
            return await self._fail(PasswordResetConfirmError.TOKEN_SUPERSEDED)

        user.change_password_hash(
            self._password_service.hash_password(cmd.new_password)
        )
        await self._user_repo.update(user)
        revoked = await self._session_repo.revoke_all_for_user(
            user.id, PASSWORD_RESET_REASON
        )

        await self._event_bus.publish(
            PasswordResetConfirmSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                email=user.email,
                sessions_revoked=revoked,
            )
        )
        return Success(value=None)

    async def _fail(self, reason: str) -> Result[None, str]:
        await self._event_bus.publish(
            PasswordResetConfirmFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                reason=reason,
            )
        )
        return Failure(error=PasswordResetConfirmError.INVALID_OR_EXPIRED)
