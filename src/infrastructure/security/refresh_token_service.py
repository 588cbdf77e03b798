"""Refresh token service.

Generates and verifies opaque refresh tokens.

Token Strategy:
    - Opaque tokens (NOT JWT), 32 random bytes, urlsafe base64
    - SHA-256 digest stored for lookup (unique index)
    - Bcrypt hash stored and checked after lookup
    - Expiration tracked in the session row, not in the token
    - Rotated on every use
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

import bcrypt

from src.core.constants import REFRESH_TOKEN_BYTES
from src.domain.protocols.refresh_token_service_protocol import IssuedRefreshToken


class RefreshTokenService:
    """Refresh token generation and verification service.

    Usage:
        issued = refresh_token_service.generate_token()

        # Persist issued.lookup_digest / issued.token_hash, return issued.token
        session = await session_repo.find_active_by_digest(
            refresh_token_service.lookup_digest(provided_token)
        )
        refresh_token_service.verify_token(provided_token, session.token_hash)
    """

    def __init__(self, expiration_days: int = 7, cost_factor: int = 10) -> None:
        """Initialize refresh token service.

        Args:
            expiration_days: Token lifetime in days (default: 7).
            cost_factor: Bcrypt cost factor for the stored hash.
        """
        self._expiration_days = expiration_days
        self._cost_factor = cost_factor

    @property
    def expiration_seconds(self) -> int:
        return self._expiration_days * 24 * 60 * 60

    def generate_token(self) -> IssuedRefreshToken:
        """Generate refresh token and its stored derivatives.

        Example:
            >>> issued = RefreshTokenService(cost_factor=4).generate_token()
            >>> len(issued.token)
            43
            >>> issued.token_hash.startswith("$2b$")
            True
        """
        token = secrets.token_urlsafe(REFRESH_TOKEN_BYTES)
        token_hash = bcrypt.hashpw(
            token.encode("utf-8"), bcrypt.gensalt(rounds=self._cost_factor)
        )

        return IssuedRefreshToken(
            token=token,
            lookup_digest=self.lookup_digest(token),
            token_hash=token_hash.decode("utf-8"),
            expires_at=self.calculate_expiration(),
        )

    def lookup_digest(self, token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def verify_token(self, token: str, token_hash: str) -> bool:
        """Verify token against stored hash.

        Returns:
            True if token matches hash, False otherwise.

        Note:
            Does NOT check expiration (the session row holds it).
        """
        try:
            return bcrypt.checkpw(token.encode("utf-8"), token_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False

    def calculate_expiration(self) -> datetime:
        """Expiration datetime (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(days=self._expiration_days)
