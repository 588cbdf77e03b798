"""Authentication domain events.

Pattern: 3 events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: User initiated action (before business logic)
- *Succeeded: Operation completed successfully (after commit)
- *Failed: Operation failed

Handlers:
- LoggingEventHandler: ALL events
- EmailEventHandler: PasswordResetRequestSucceeded, UserPasswordChangeSucceeded,
  PasswordResetConfirmSucceeded
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# User Registration (Workflow 1)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserRegistrationAttempted(DomainEvent):
    """User registration attempt initiated.

    Attributes:
        email: Email address attempted.
        username: Username attempted.
    """

    email: str
    username: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationSucceeded(DomainEvent):
    """User registration completed successfully."""

    user_id: UUID
    email: str
    username: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationFailed(DomainEvent):
    """User registration failed (duplicate email/username)."""

    email: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# User Login (Workflow 2)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserLoginAttempted(DomainEvent):
    """Login attempt initiated."""

    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    """Login succeeded and a session was created."""

    user_id: UUID
    email: str
    session_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """Login failed.

    Attributes:
        email: Email address attempted.
        reason: Internal reason (user_not_found, invalid_password). Never
            surfaced to the client.
    """

    email: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Auth Token Refresh (Workflow 3)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class AuthTokenRefreshAttempted(DomainEvent):
    """Refresh token presented for rotation."""


@dataclass(frozen=True, kw_only=True)
class AuthTokenRefreshSucceeded(DomainEvent):
    """Refresh token rotated.

    Attributes:
        user_id: Session owner.
        old_session_id: Revoked session.
        new_session_id: Replacement session.
    """

    user_id: UUID
    old_session_id: UUID
    new_session_id: UUID


@dataclass(frozen=True, kw_only=True)
class AuthTokenRefreshFailed(DomainEvent):
    """Refresh rejected (unknown, revoked or expired token)."""

    reason: str


# ═══════════════════════════════════════════════════════════════
# User Logout (Workflow 4)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserLogoutSucceeded(DomainEvent):
    """User logged out.

    Attributes:
        user_id: User logging out (None when only a cookie was presented).
        session_revoked: Whether a matching session was revoked.
    """

    user_id: UUID | None
    session_revoked: bool


# ═══════════════════════════════════════════════════════════════
# Password Change (Workflow 5)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserPasswordChangeAttempted(DomainEvent):
    """Authenticated password change initiated."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserPasswordChangeSucceeded(DomainEvent):
    """Password changed; all sessions revoked.

    Attributes:
        user_id: User whose password changed.
        email: Address for the security notice email.
        sessions_revoked: Number of sessions revoked.
    """

    user_id: UUID
    email: str
    sessions_revoked: int


@dataclass(frozen=True, kw_only=True)
class UserPasswordChangeFailed(DomainEvent):
    """Password change rejected."""

    user_id: UUID
    reason: str


# ═══════════════════════════════════════════════════════════════
# Password Reset (Workflow 6)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestAttempted(DomainEvent):
    """Forgot-password form submitted."""

    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestSucceeded(DomainEvent):
    """Reset token issued for a known user.

    Attributes:
        user_id: User requesting the reset.
        email: Destination address.
        reset_token: Plain token for the email link. Handlers MUST NOT log it.
        expires_at: Token expiry.
    """

    user_id: UUID
    email: str
    reset_token: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestFailed(DomainEvent):
    """Reset requested for an unknown email (client still sees success)."""

    email: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmAttempted(DomainEvent):
    """Reset token presented with a new password."""


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmSucceeded(DomainEvent):
    """Password reset via token; token consumed and sessions revoked."""

    user_id: UUID
    email: str
    sessions_revoked: int


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmFailed(DomainEvent):
    """Reset token rejected."""

    reason: str
