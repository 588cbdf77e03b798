"""Password reset token service protocol.

Reset tokens are signed with a secret distinct from the access token secret
and carry ``type="reset"``. Only a one-way hash of the token is stored on the
user record.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.result import Result


@dataclass(frozen=True, kw_only=True)
class IssuedResetToken:
    """Freshly issued reset token.

    Attributes:
        token: Plain token to email to the user (never stored).
        token_hash: One-way hash to store on the user record.
        expires_at: Expiration timestamp (UTC), equal to the JWT ``exp``.
    """

    token: str
    token_hash: str
    expires_at: datetime


class PasswordResetTokenServiceProtocol(Protocol):
    """Protocol for reset token issuance and verification."""

    def issue_token(self, user_id: UUID) -> IssuedResetToken:
        """Sign a new reset token for ``user_id``."""
        ...

    def decode_token(self, token: str) -> Result[UUID, str]:
        """Verify signature, expiry and token type.

        Returns:
            Success(user_id) or Failure(AuthenticationError.*).
        """
        ...

    def verify_token_hash(self, token: str, token_hash: str) -> bool:
        """Check ``token`` against the hash stored on the user."""
        ...
