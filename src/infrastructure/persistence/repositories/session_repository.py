"""SessionRepository - SQLAlchemy implementation for refresh-token sessions."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.session_repository import SessionData
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.user_session import UserSession


def _to_data(model: UserSession) -> SessionData:
    """Convert database model to domain DTO."""
    return SessionData(
        id=model.id,
        user_id=model.user_id,
        lookup_digest=model.lookup_digest,
        token_hash=model.token_hash,
        expires_at=ensure_utc(model.expires_at),  # type: ignore[arg-type]
        revoked_at=ensure_utc(model.revoked_at),
        revoked_reason=model.revoked_reason,
        last_used_at=ensure_utc(model.last_used_at),
        user_agent=model.user_agent,
        ip_address=model.ip_address,
    )


class SessionRepository:
    """SQLAlchemy implementation for refresh-token session persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(self, session_data: SessionData) -> None:
        """Persist a new session."""
        model = UserSession(
            id=session_data.id,
            user_id=session_data.user_id,
            lookup_digest=session_data.lookup_digest,
            token_hash=session_data.token_hash,
            expires_at=session_data.expires_at,
            user_agent=session_data.user_agent,
            ip_address=session_data.ip_address,
        )
        self.session.add(model)
        await self.session.commit()

    async def find_active_by_digest(self, lookup_digest: str) -> SessionData | None:
        """Find a non-revoked session by token digest.

        Expiry is left to the caller so expired tokens can be reported as such.
        """
        stmt = (
            select(UserSession)
            .where(UserSession.lookup_digest == lookup_digest)
            .where(UserSession.revoked_at.is_(None))
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def revoke(self, session_id: UUID, reason: str) -> bool:
        """Revoke one session and stamp its last use.

        Returns:
            False if the session was already revoked, so a concurrent caller
            that lost the race can tell it did not perform the revocation.
        """
        now = datetime.now(UTC)
        stmt = (
            update(UserSession)
            .where(UserSession.id == session_id)
            .where(UserSession.revoked_at.is_(None))
            .values(revoked_at=now, revoked_reason=reason, last_used_at=now, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return bool(result.rowcount)

    async def revoke_all_for_user(self, user_id: UUID, reason: str) -> int:
        """Revoke every active session of a user.

        Used on password change and password reset.

        Returns:
            Number of sessions revoked.
        """
        now = datetime.now(UTC)
        stmt = (
            update(UserSession)
            .where(UserSession.user_id == user_id)
            .where(UserSession.revoked_at.is_(None))
            .values(revoked_at=now, revoked_reason=reason, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0
