"""Password reset token service.

Issues signed, short-lived reset tokens and verifies them.

Token Strategy:
    - JWT ``{sub, type: "reset", jti, iat, exp}`` signed with a secret that
      is distinct from the access token secret
    - Lifetime from ``settings.password_reset_expire_minutes``
    - Only ``bcrypt(sha256(token))`` is stored on the user. The SHA-256
      pre-hash keeps the input under bcrypt's 72-byte limit, since a JWT is
      longer than that and would otherwise be truncated.
    - A new request overwrites the stored hash (one valid token per user)
"""

import hashlib
from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.constants import RESET_TOKEN_TYPE
from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols.password_reset_token_service_protocol import (
    IssuedResetToken,
)


class PasswordResetTokenService:
    """Password reset token issuance and verification.

    Usage:
        issued = reset_token_service.issue_token(user.id)
        user.set_reset_token(issued.token_hash, issued.expires_at)

        match reset_token_service.decode_token(token):
            case Success(value=user_id):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 60,
        algorithm: str = "HS256",
        cost_factor: int = 10,
    ) -> None:
        if len(secret_key) < 32:
            msg = "Reset token secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm
        self._cost_factor = cost_factor

    def issue_token(self, user_id: UUID) -> IssuedResetToken:
        """Sign a reset token for ``user_id`` and hash it for storage."""
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "type": RESET_TOKEN_TYPE,
            "jti": str(uuid7()),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

        token_hash = bcrypt.hashpw(
            self._prehash(token), bcrypt.gensalt(rounds=self._cost_factor)
        ).decode("utf-8")

        return IssuedResetToken(
            token=token,
            token_hash=token_hash,
            # exp claim has second precision
            expires_at=datetime.fromtimestamp(int(expires_at.timestamp()), UTC),
        )

    def decode_token(self, token: str) -> Result[UUID, str]:
        """Verify signature, expiry and ``type == "reset"``.

        Returns:
            Success(user_id) or Failure(AuthenticationError.*).
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "type"]},
            )
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        if payload.get("type") != RESET_TOKEN_TYPE:
            return Failure(error=AuthenticationError.INVALID_TOKEN_TYPE)

        try:
            return Success(value=UUID(str(payload["sub"])))
        except ValueError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

    def verify_token_hash(self, token: str, token_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._prehash(token), token_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False

    @staticmethod
    def _prehash(token: str) -> bytes:
        return hashlib.sha256(token.encode("utf-8")).hexdigest().encode("ascii")
