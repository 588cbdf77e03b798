"""Refresh-token session model.

Security:
    - lookup_digest: SHA-256 of the refresh token (unique, indexed for lookup)
    - token_hash: Bcrypt hash verified after lookup (NOT plaintext)
    - revoked_at: Set on rotation, logout and password change/reset
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class UserSession(BaseMutableModel):
    """One issued refresh token.

    Token Lifecycle:
        1. Created on register/login
        2. Revoked with reason ``rotated`` when exchanged on refresh
        3. Revoked on logout, password change or password reset
        4. Expires naturally after ``refresh_token_expire_days``
    """

    __tablename__ = "user_sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this session",
    )

    lookup_digest: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    revoked_reason: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="rotated, logout, password_change, password_reset",
    )

    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<UserSession("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"revoked={self.revoked_at is not None}"
            f")>"
        )
