"""Login handler.

Flow:
1. Emit UserLoginAttempted event
2. Look up user by email
3. Verify password
4. Issue access/refresh tokens (new session)
5. Emit UserLoginSucceeded event
6. Return Success(AuthTokens)

Unknown email and wrong password return the same error so callers cannot
tell which accounts exist. The internal reason only goes to the Failed event.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import AuthenticateUser
from src.application.dtos.auth_dtos import AuthTokens
from src.application.services.auth_token_issuer import AuthTokenIssuer
from src.application.services.request_metadata import request_metadata
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.events.auth_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class LoginError:
    """Login errors (client-facing and internal reasons)."""

    INVALID_CREDENTIALS = AuthenticationError.INVALID_CREDENTIALS

    # Internal reasons (events only)
    USER_NOT_FOUND = "user_not_found"
    INVALID_PASSWORD = "invalid_password"


class AuthenticateUserHandler:
    """Handler for login with email and password."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._event_bus = event_bus

    async def handle(self, cmd: AuthenticateUser) -> Result[AuthTokens, str]:
        """Handle login command.

        Returns:
            Success(AuthTokens) with a fresh token pair
            Failure("Invalid credentials") otherwise
        """
        metadata = request_metadata(cmd.ip_address, cmd.user_agent)
        await self._event_bus.publish(
            UserLoginAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                email=cmd.email,
            ),
            metadata=metadata,
        )

        user = await self._user_repo.find_by_email(cmd.email)
        reason: str | None = None
        if user is None:
            reason = LoginError.USER_NOT_FOUND
        elif not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            reason = LoginError.INVALID_PASSWORD

        if user is None or reason is not None:
            await self._event_bus.publish(
                UserLoginFailed(
                    event_id=uuid7(),
                    occurred_at=datetime.now(UTC),
                    email=cmd.email,
                    reason=reason or LoginError.USER_NOT_FOUND,
                ),
                metadata=metadata,
            )
            return Failure(error=LoginError.INVALID_CREDENTIALS)

        tokens, session_id = await self._token_issuer.issue(
            user, ip_address=cmd.ip_address, user_agent=cmd.user_agent
        )

        await self._event_bus.publish(
            UserLoginSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                email=user.email,
                session_id=session_id,
            ),
            metadata=metadata,
        )
        return Success(value=tokens)
