"""Logout handler.

Revokes the session behind the presented refresh token. Logout is
idempotent: a missing, unknown or already revoked token still succeeds.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.auth_commands import LogoutUser
from src.core.result import Result, Success
from src.domain.events.auth_events import UserLogoutSucceeded
from src.domain.protocols import (
    EventBusProtocol,
    RefreshTokenServiceProtocol,
    SessionRepository,
)

LOGOUT_REASON = "logout"


class LogoutUserHandler:
    """Handler for logout command."""

    def __init__(
        self,
        session_repo: SessionRepository,
        refresh_token_service: RefreshTokenServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._session_repo = session_repo
        self._refresh_token_service = refresh_token_service
        self._event_bus = event_bus

    async def handle(self, cmd: LogoutUser) -> Result[None, str]:
        """Handle logout command.

        Returns:
            Success(None) always.
        """
        user_id = cmd.user_id
        revoked = False

        if cmd.refresh_token:
            digest = self._refresh_token_service.lookup_digest(cmd.refresh_token)
            session = await self._session_repo.find_active_by_digest(digest)
            if session is not None and self._refresh_token_service.verify_token(
                cmd.refresh_token, session.token_hash
            ):
                # Another user's token is left alone
                if user_id is None or session.user_id == user_id:
                    await self._session_repo.revoke(session.id, LOGOUT_REASON)
                    user_id = session.user_id
                    revoked = True

        await self._event_bus.publish(
            UserLogoutSucceeded(
                event_id=uuid7(),
                occurred_at=datetime.now(UTC),
                user_id=user_id,
                session_revoked=revoked,
            )
        )
        return Success(value=None)
