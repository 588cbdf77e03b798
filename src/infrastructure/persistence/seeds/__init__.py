"""Database seeding package.

Seeders are idempotent and opt-in: they run after migrations only when
requested with ``alembic -x seed=true upgrade head``.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.seeds.catalog_seeder import (
    seed_catalog,
    seed_games,
)

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders in dependency order."""
    logger.info("seeding_started")

    await seed_catalog(session)
    await seed_games(session)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_catalog", "seed_games"]
