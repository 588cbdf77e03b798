"""Authentication DTOs (Data Transfer Objects).

Result dataclasses for authentication command handlers. These carry data
from handlers back to the presentation layer.
"""

from dataclasses import dataclass

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Response from successful register, login or refresh.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: Opaque refresh token (long-lived, rotated on use).
        token_type: Token type (always "bearer").
        expires_in: Access token expiration in seconds.
        refresh_expires_in: Refresh token expiration in seconds (cookie max-age).
        user: The signed-in user.
    """

    access_token: str
    refresh_token: str
    user: User
    token_type: str = "bearer"
    expires_in: int = 900  # 15 minutes in seconds
    refresh_expires_in: int = 604800  # 7 days in seconds
