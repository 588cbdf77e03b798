"""Registration handler.

Flow:
1. Emit UserRegistrationAttempted event
2. Validate email/username/password (handled by Annotated types)
3. Check email and username uniqueness
4. Hash password
5. Create and save User entity
6. Issue access/refresh tokens (new session)
7. Emit UserRegistrationSucceeded event
8. Return Success(AuthTokens)

On failure:
- Emit UserRegistrationFailed event
- Return Failure(error)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.dtos.auth_dtos import AuthTokens
from src.application.services.auth_token_issuer import AuthTokenIssuer
from src.application.services.request_metadata import request_metadata
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import DuplicateRecordError
from src.domain.events.auth_events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegistrationError:
    """Registration-specific errors."""

    EMAIL_ALREADY_EXISTS = "Email already registered"
    USERNAME_ALREADY_EXISTS = "Username already taken"


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            token_issuer: Issues the initial token pair
            event_bus: Event bus for publishing domain events
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._event_bus = event_bus

    async def handle(self, cmd: RegisterUser) -> Result[AuthTokens, str]:
        """Handle user registration command.

        Returns:
            Success(AuthTokens) on successful registration
            Failure(error_message) on duplicate email or username
        """
        metadata = request_metadata(cmd.ip_address, cmd.user_agent)
        await self._event_bus.publish(
            UserRegistrationAttempted(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                email=cmd.email,
                username=cmd.username,
            ),
            metadata=metadata,
        )

        error = await self._find_conflict(cmd)
        if error is not None:
            return await self._fail(cmd, error, metadata)

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            email=cmd.email,
            username=cmd.username,
            password_hash=self._password_service.hash_password(cmd.password),
            display_name=cmd.display_name,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._user_repo.save(user)
        except DuplicateRecordError:
            # Lost a race with a concurrent registration of the same identity
            error = await self._find_conflict(cmd)
            return await self._fail(
                cmd, error or RegistrationError.EMAIL_ALREADY_EXISTS, metadata
            )

        tokens, _ = await self._token_issuer.issue(
            user, ip_address=cmd.ip_address, user_agent=cmd.user_agent
        )

        await self._event_bus.publish(
            UserRegistrationSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                email=user.email,
                username=user.username,
            ),
            metadata=metadata,
        )
        return Success(value=tokens)

    async def _find_conflict(self, cmd: RegisterUser) -> str | None:
        if await self._user_repo.find_by_email(cmd.email) is not None:
            return RegistrationError.EMAIL_ALREADY_EXISTS
        if await self._user_repo.find_by_username(cmd.username) is not None:
            return RegistrationError.USERNAME_ALREADY_EXISTS
        return None

    async def _fail(
        self, cmd: RegisterUser, error: str, metadata: dict[str, str]
    ) -> Result[AuthTokens, str]:
        await self._event_bus.publish(
            UserRegistrationFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                email=cmd.email,
                reason=error,
            ),
            metadata=metadata,
        )
        return Failure(error=error)
