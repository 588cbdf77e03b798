"""Refresh Access Token handler (rotation).

Flow:
1. Emit AuthTokenRefreshAttempted event
2. Find active session by the token's lookup digest
3. Verify token against the stored bcrypt hash
4. Verify session not expired
5. Load session owner
6. Revoke old session (reason "rotated") and issue a new token pair
7. Emit AuthTokenRefreshSucceeded event
8. Return Success(AuthTokens)

A rotated or revoked token is never found again by step 2, so replaying it
fails. Two concurrent refreshes can both pass step 2; only the one whose
revoke in step 6 actually flips the row issues tokens.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import AuthTokens
from src.application.services.auth_token_issuer import AuthTokenIssuer
from src.application.services.request_metadata import request_metadata
from src.core.result import Failure, Result, Success
from src.domain.events.auth_events import (
    AuthTokenRefreshAttempted,
    AuthTokenRefreshFailed,
    AuthTokenRefreshSucceeded,
)
from src.domain.protocols import (
    EventBusProtocol,
    RefreshTokenServiceProtocol,
    SessionRepository,
    UserRepository,
)

ROTATED_REASON = "rotated"


class RefreshError:
    """Refresh errors (client-facing and internal reasons)."""

    INVALID_REFRESH_TOKEN = "Invalid refresh token"

    # Internal reasons (events only)
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_MISMATCH = "token_mismatch"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_ALREADY_ROTATED = "token_already_rotated"
    USER_NOT_FOUND = "user_not_found"


class RefreshAccessTokenHandler:
    """Handler for refresh token rotation."""

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        refresh_token_service: RefreshTokenServiceProtocol,
        token_issuer: AuthTokenIssuer,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._refresh_token_service = refresh_token_service
        self._token_issuer = token_issuer
        self._event_bus = event_bus

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthTokens, str]:
        """Handle refresh command.

        Returns:
            Success(AuthTokens) with the rotated pair
            Failure("Invalid refresh token") for unknown, revoked or expired tokens
        """
        metadata = request_metadata(cmd.ip_address, cmd.user_agent)
        await self._event_bus.publish(
            AuthTokenRefreshAttempted(event_id=uuid7(), occurred_at=datetime.now(UTC)),
            metadata=metadata,
        )

        digest = self._refresh_token_service.lookup_digest(cmd.refresh_token)
        session = await self._session_repo.find_active_by_digest(digest)
        if session is None:
            return await self._fail(RefreshError.TOKEN_NOT_FOUND, metadata)

        if not self._refresh_token_service.verify_token(
            cmd.refresh_token, session.token_hash
        ):
            return await self._fail(RefreshError.TOKEN_MISMATCH, metadata)

        if session.expires_at <= datetime.now(UTC):
            return await self._fail(RefreshError.TOKEN_EXPIRED, metadata)

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            return await self._fail(RefreshError.USER_NOT_FOUND, metadata)

        if not await self._session_repo.revoke(session.id, ROTATED_REASON):
            return await self._fail(RefreshError.TOKEN_ALREADY_ROTATED, metadata)

        tokens, new_session_id = await self._token_issuer.issue(
            user, ip_address=cmd.ip_address, user_agent=cmd.user_agent
        )

        await self._event_bus.publish(
            AuthTokenRefreshSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user.id,
                old_session_id=session.id,
                new_session_id=new_session_id,
            ),
            metadata=metadata,
        )
        return Success(value=tokens)

    async def _fail(
        self, reason: str, metadata: dict[str, str]
    ) -> Result[AuthTokens, str]:
        await self._event_bus.publish(
            AuthTokenRefreshFailed(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                reason=reason,
            ),
            metadata=metadata,
        )
        return Failure(error=RefreshError.INVALID_REFRESH_TOKEN)
