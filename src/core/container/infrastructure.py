"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite in tests)
- Password hashing (bcrypt)
- Access tokens (JWT)
- Refresh tokens (opaque, hashed at rest)
- Password reset tokens (JWT with a separate secret)
- Logging (structlog console/JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.password_reset_token_service_protocol import (
        PasswordResetTokenServiceProtocol,
    )
    from src.domain.protocols.refresh_token_service_protocol import (
        RefreshTokenServiceProtocol,
    )
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.

    Usage:
        @router.get("/games")
        async def list_games(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from ``BCRYPT_ROUNDS`` (12 by default, 4 in tests).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT access token service singleton (app-scoped).

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_refresh_token_service() -> "RefreshTokenServiceProtocol":
    """Get refresh token service singleton (app-scoped)."""
    from src.infrastructure.security import RefreshTokenService

    return RefreshTokenService(
        expiration_days=settings.refresh_token_expire_days,
        cost_factor=settings.reset_token_bcrypt_rounds,
    )


@lru_cache()
def get_password_reset_token_service() -> "PasswordResetTokenServiceProtocol":
    """Get password reset token service singleton (app-scoped).

    Signs with ``RESET_SECRET_KEY`` so an access token can never be replayed
    as a reset token (and vice versa).
    """
    from src.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService(
        secret_key=settings.reset_secret_key,
        expiration_minutes=settings.password_reset_expire_minutes,
        algorithm=settings.algorithm,
        cost_factor=settings.reset_token_bcrypt_rounds,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
