"""Access token generation protocol for domain layer.

Token Strategy:
    - Access tokens: short-lived JWT, validated statelessly
    - Refresh tokens: long-lived opaque tokens (RefreshTokenServiceProtocol)
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=[user.role.value],
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = payload["sub"]
            case Failure(error=error):
                ...
    """

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        username: str,
        roles: list[str],
    ) -> str:
        """Generate a signed access token.

        Claims: sub, email, username, roles, iat, exp, jti.
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate signature and expiry.

        Returns:
            Success(payload) or Failure(AuthenticationError.*).
        """
        ...

    @property
    def expiration_seconds(self) -> int:
        """Access token lifetime in seconds (``expires_in`` in responses)."""
        ...
