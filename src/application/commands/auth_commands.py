"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
- Use Annotated types for validation (request schemas apply them)

Commands that create or rotate sessions carry the client ``ip_address`` and
``user_agent``; they are stored on the session row and passed to event
handlers as request metadata.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.types import Email, Password, RefreshToken, ResetToken, Username


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new member account and sign them in.

    Attributes:
        email: User's email address (validated, normalized).
        username: Public username (validated).
        password: User's password (validated strength, plain text, will be hashed).
        display_name: Optional display name.

    Example:
        >>> command = RegisterUser(
        ...     email="player@example.com",
        ...     username="pixel_knight",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    email: Email
    username: Username
    password: Password
    display_name: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class AuthenticateUser:
    """Log in with email and password.

    Returns AuthTokens on success. Unknown email and wrong password produce
    the same failure so callers cannot enumerate accounts.
    """

    email: Email
    password: str
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new token pair (rotation).

    Attributes:
        refresh_token: Opaque refresh token (body or ``refreshToken`` cookie).
    """

    refresh_token: RefreshToken
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke the presented refresh token (if any).

    Attributes:
        user_id: Authenticated user, when an access token was presented.
        refresh_token: Refresh token to revoke; logout with no token is a no-op.
    """

    user_id: UUID | None = None
    refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change password for an authenticated user.

    Revokes every session of the user on success.
    """

    user_id: UUID
    current_password: str
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset email.

    Always succeeds from the caller's perspective (no user enumeration).

    Attributes:
        email: User's email address (validated, normalized).
        ip_address: Client IP address (for audit).
        user_agent: Client user agent (for audit).
    """

    email: Email
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password using a reset token.

    Attributes:
        token: Password reset token received by email.
        new_password: New password (validated strength, plain text, will be hashed).
    """

    token: ResetToken
    new_password: Password
