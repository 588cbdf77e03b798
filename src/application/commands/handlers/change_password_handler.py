"""Change password handler (authenticated).

Flow:
1. Emit UserPasswordChangeAttempted event
2. Verify current password
3. Hash and store new password (clears any pending reset token)
4. Revoke all sessions of the user
5. Emit UserPasswordChangeSucceeded event (triggers security email)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import ChangePassword
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    UserPasswordChangeAttempted,
    UserPasswordChangeFailed,
    UserPasswordChangeSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    SessionRepository,
    UserRepository,
)

PASSWORD_CHANGED_REASON = "password_changed"


class ChangePasswordError:
    """Change password errors."""

    USER_NOT_FOUND = "User not found"
    INCORRECT_PASSWORD = "Current password is incorrect"


class ChangePasswordHandler:
    """Handler for ChangePassword command."""

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        password_service: PasswordHashingProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._password_service = password_service
        self._event_bus = event_bus

    async def handle(self, cmd: ChangePassword) -> Result[None, str]:
        await self._event_bus.publish(
            UserPasswordChangeAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=cmd.user_id,
            )
        )

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return await self._fail(cmd, ChangePasswordError.USER_NOT_FOUND)

        if not self._password_service.verify_password(
            cmd.current_password, user.password_hash
        ):
            return await self._fail(cmd, ChangePasswordError.INCORRECT_PASSWORD)

        user.change_password_hash(
            self._password_service.hash_password(cmd.new_password)
        )
        await self._user_repo.update(user)
        revoked = await self._session_repo.revoke_all_for_user(
            user.id, PASSWORD_CHANGED_REASON
        )

        await self._event_bus.publish(
            UserPasswordChangeSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                email=user.email,
                sessions_revoked=revoked,
            )
        )
        return Success(value=None)

    async def _fail(self, cmd: ChangePassword, error: str) -> Result[None, str]:
        await self._event_bus.publish(
            UserPasswordChangeFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=cmd.user_id,
                reason=error,
            )
        )
        return Failure(error=error)
