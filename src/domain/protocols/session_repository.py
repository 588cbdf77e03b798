"""SessionRepository protocol for refresh-token sessions.

A session row represents one issued refresh token. Rotation revokes the old
row and creates a new one; logout and password changes revoke rows.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class SessionData:
    """Refresh-token session record.

    Attributes:
        id: Session identifier.
        user_id: Owner of the session.
        lookup_digest: SHA-256 digest of the refresh token (indexed).
        token_hash: Bcrypt hash of the refresh token.
        expires_at: Expiration timestamp.
        revoked_at: Revocation timestamp (None while active).
        revoked_reason: Why the session was revoked.
        last_used_at: Last successful refresh.
        user_agent: Client user agent at login.
        ip_address: Client IP at login.
    """

    id: UUID
    user_id: UUID
    lookup_digest: str
    token_hash: str
    expires_at: datetime
    revoked_at: datetime | None = None
    revoked_reason: str | None = None
    last_used_at: datetime | None = None
    user_agent: str | None = None
    ip_address: str | None = None


class SessionRepository(Protocol):
    """Session repository protocol (port)."""

    async def save(self, session_data: SessionData) -> None:
        """Persist a new session."""
        ...

    async def find_active_by_digest(self, lookup_digest: str) -> SessionData | None:
        """Find a non-revoked session by token digest (expiry not checked)."""
        ...

    async def revoke(self, session_id: UUID, reason: str) -> bool:
        """Revoke one session.

        Returns:
            True if this call revoked it, False if it was already revoked.
        """
        ...

    async def revoke_all_for_user(self, user_id: UUID, reason: str) -> int:
        """Revoke every active session of a user.

        Returns:
            Number of sessions revoked.
        """
        ...
