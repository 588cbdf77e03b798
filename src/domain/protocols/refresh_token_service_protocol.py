"""Refresh token service protocol.

Refresh tokens are opaque random strings. Two derived values are stored:
a SHA-256 lookup digest (indexed, deterministic) and a bcrypt hash that is
checked after lookup. The plain token is never persisted.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True, kw_only=True)
class IssuedRefreshToken:
    """Freshly generated refresh token.

    Attributes:
        token: Plain token returned to the client (never stored).
        lookup_digest: SHA-256 hex digest used to find the session row.
        token_hash: Bcrypt hash verified after lookup.
        expires_at: Expiration timestamp (UTC).
    """

    token: str
    lookup_digest: str
    token_hash: str
    expires_at: datetime


class RefreshTokenServiceProtocol(Protocol):
    """Protocol for refresh token generation and verification."""

    def generate_token(self) -> IssuedRefreshToken:
        """Generate a new refresh token with its stored derivatives."""
        ...

    def lookup_digest(self, token: str) -> str:
        """Deterministic digest of ``token`` for database lookup."""
        ...

    def verify_token(self, token: str, token_hash: str) -> bool:
        """Verify token against stored bcrypt hash."""
        ...

    @property
    def expiration_seconds(self) -> int:
        """Refresh token lifetime in seconds (cookie max-age)."""
        ...
