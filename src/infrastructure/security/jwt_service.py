"""JWT access token service (adapter).

Implements TokenGenerationProtocol using PyJWT.

Security:
    - HMAC signing (``settings.algorithm``, HS256 by default)
    - 256-bit secret key minimum
    - Short expiration (``settings.access_token_expire_minutes``)
    - Unique JWT ID (jti) per token

Performance:
    - Stateless validation (no database lookup)
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        token_service = get_token_service()

        token = token_service.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=[user.role.value],
        )

        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 15,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing (at least 32 bytes).
            expiration_minutes: Token expiration in minutes (default: 15).
            algorithm: Signing algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    @property
    def expiration_seconds(self) -> int:
        return self._expiration_minutes * 60

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        username: str,
        roles: list[str],
    ) -> str:
        """Generate JWT access token.

        Returns:
            JWT access token string (header.payload.signature).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(),
            ...     email="user@example.com",
            ...     username="pixel_knight",
            ...     roles=["user"],
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "username": username,
            "roles": roles,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        PyJWT validates the signature and the ``exp`` claim.

        Returns:
            Success with payload dict, or Failure with
            ``AuthenticationError.EXPIRED_TOKEN`` / ``INVALID_TOKEN``.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        return Success(value=payload)
