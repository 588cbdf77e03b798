"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances with shared session, so all
repositories used by one handler commit or roll back together.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        ActivityRepository,
        CatalogRepository,
        CommentRepository,
        FollowRepository,
        GameListRepository,
        GameRepository,
        LikeRepository,
        NotificationRepository,
        ReviewRepository,
        SessionRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        UserRepository instance.

    Usage:
        @router.get("/users")
        async def list_users(
            user_repo: UserRepository = Depends(get_user_repository)
        ):
            ...
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_session_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "SessionRepository":
    """Get refresh-token session repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import SessionRepository

    return SessionRepository(session=session)


async def get_game_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "GameRepository":
    """Get game repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import GameRepository

    return GameRepository(session=session)


async def get_catalog_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CatalogRepository":
    from src.infrastructure.persistence.repositories import CatalogRepository

    return CatalogRepository(session=session)


async def get_review_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ReviewRepository":
    """Get review repository (request-scoped).

    Shares the request session with LikeRepository so rating stats and
    likes stay consistent within one unit of work.
    """
    from src.infrastructure.persistence.repositories import ReviewRepository

    return ReviewRepository(session=session)


async def get_like_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "LikeRepository":
    from src.infrastructure.persistence.repositories import LikeRepository

    return LikeRepository(session=session)


async def get_comment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CommentRepository":
    from src.infrastructure.persistence.repositories import CommentRepository

    return CommentRepository(session=session)


async def get_follow_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "FollowRepository":
    from src.infrastructure.persistence.repositories import FollowRepository

    return FollowRepository(session=session)


async def get_game_list_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "GameListRepository":
    from src.infrastructure.persistence.repositories import GameListRepository

    return GameListRepository(session=session)


async def get_notification_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "NotificationRepository":
    from src.infrastructure.persistence.repositories import NotificationRepository

    return NotificationRepository(session=session)


async def get_activity_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ActivityRepository":
    from src.infrastructure.persistence.repositories import ActivityRepository

    return ActivityRepository(session=session)
