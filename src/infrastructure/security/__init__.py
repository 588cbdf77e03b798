"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- JWT access token generation/validation
- Refresh token generation/verification (opaque tokens, SHA-256 + bcrypt)
- Password reset token issuance/verification (signed JWT, stored hashed)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)
from src.infrastructure.security.refresh_token_service import RefreshTokenService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "PasswordResetTokenService",
    "RefreshTokenService",
]
