"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/register         - Create account and sign in
    POST /api/v1/auth/login            - Sign in
    POST /api/v1/auth/refresh          - Rotate refresh token, new access token
    POST /api/v1/auth/logout           - Revoke refresh token
    GET  /api/v1/auth/me               - Current user
    POST /api/v1/auth/change-password  - Change password (revokes sessions)
    POST /api/v1/auth/forgot-password  - Request reset email
    POST /api/v1/auth/reset-password   - Set new password from reset token
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.auth_dtos import AuthTokens
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.domain.types import Email, Password, RefreshToken, ResetToken, Username


# =============================================================================
# User representation
# =============================================================================


class UserResponse(BaseModel):
    """Full account view, returned to the account owner only."""

    id: UUID
    email: str
    username: str
    role: UserRole
    display_name: str | None = None
    bio: str | None = None
    avatar: str | None = None
    location: str | None = None
    website: str | None = None
    is_private: bool = False
    language: str = "en"
    timezone: str = "UTC"
    email_notifications: bool = True
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            role=user.role,
            display_name=user.display_name,
            bio=user.bio,
            avatar=user.avatar,
            location=user.location,
            website=user.website,
            is_private=user.is_private,
            language=user.language,
            timezone=user.timezone,
            email_notifications=user.email_notifications,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# =============================================================================
# Registration / Login
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for registration.

    POST /api/v1/auth/register
    Returns: 201 Created
    """

    email: Email
    username: Username
    password: Password
    display_name: str | None = Field(None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "player@example.com",
                "username": "pixel_knight",
                "password": "SecurePass123!",
                "display_name": "Pixel Knight",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    The password is not strength-checked here: older passwords must still
    be accepted, and a wrong password yields the same 401 either way.
    """

    email: Email
    password: str = Field(..., min_length=1, max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "player@example.com", "password": "SecurePass123!"}
        }
    )


class AuthResponse(BaseModel):
    """Tokens plus the signed-in user.

    The same tokens are also set as httpOnly cookies.
    """

    user: UserResponse
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    token_type: str = Field(default="bearer", description="Authorization scheme")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    @classmethod
    def from_dto(cls, tokens: AuthTokens) -> "AuthResponse":
        return cls(
            user=UserResponse.from_entity(tokens.user),
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            token_type=tokens.token_type,
            expires_in=tokens.expires_in,
        )


# =============================================================================
# Refresh / Logout
# =============================================================================


class RefreshRequest(BaseModel):
    """Refresh token in the body; the ``refreshToken`` cookie is the fallback."""

    refresh_token: RefreshToken | None = None


class LogoutRequest(BaseModel):
    refresh_token: str | None = Field(None, max_length=256)


# =============================================================================
# Password management
# =============================================================================


class ChangePasswordRequest(BaseModel):
    """POST /api/v1/auth/change-password"""

    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: Password


class ForgotPasswordRequest(BaseModel):
    """POST /api/v1/auth/forgot-password"""

    email: Email


class ResetPasswordRequest(BaseModel):
    """POST /api/v1/auth/reset-password"""

    token: ResetToken
    new_password: Password


class ForgotPasswordResponse(BaseModel):
    """Response for forgot-password, identical for known and unknown emails."""

    message: str = Field(
        default="If an account exists for this email, a reset link has been sent.",
    )


class ResetPasswordResponse(BaseModel):
    message: str = Field(
        default="Password has been reset. Please sign in with your new password.",
    )
