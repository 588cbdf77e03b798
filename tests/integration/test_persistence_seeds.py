"""Integration tests for the demo catalog seeders."""

import pytest

from src.domain.protocols import CatalogKind
from src.infrastructure.persistence.repositories import (
    CatalogRepository,
    GameRepository,
)
from src.infrastructure.persistence.seeds import (
    run_all_seeders,
    seed_catalog,
    seed_games,
)
from src.infrastructure.persistence.seeds.catalog_seeder import (
    DEFAULT_DEVELOPERS,
    DEFAULT_GAMES,
    DEFAULT_GENRES,
    DEFAULT_PLATFORMS,
    DEFAULT_PUBLISHERS,
)

CATALOG_SIZE = (
    len(DEFAULT_GENRES)
    + len(DEFAULT_PLATFORMS)
    + len(DEFAULT_DEVELOPERS)
    + len(DEFAULT_PUBLISHERS)
)


@pytest.mark.integration
class TestCatalogSeeders:
    async def test_seeds_catalog_and_games(self, session):
        await run_all_seeders(session)

        catalog = CatalogRepository(session)
        genres = await catalog.list_entries(CatalogKind.GENRE)
        assert len(genres) == len(DEFAULT_GENRES)
        assert "role-playing" in {genre.slug for genre in genres}

        game = await GameRepository(session).find_by_slug("elden-ring")
        assert game is not None
        genre_ids = {genre.slug: genre.id for genre in genres}
        assert set(game.genre_ids) == {
            genre_ids["role-playing"],
            genre_ids["action"],
            genre_ids["adventure"],
        }
        assert len(game.platform_ids) == 4
        assert game.developer_id is not None
        assert game.publisher_id is not None
        assert game.review_count == 0
        assert game.average_rating == 0

    async def test_game_without_publisher(self, session):
        await run_all_seeders(session)

        game = await GameRepository(session).find_by_slug("indie-puzzle-adventure")

        assert game is not None
        assert game.publisher_id is None

    async def test_rerun_creates_nothing(self, session):
        assert await seed_catalog(session) == CATALOG_SIZE
        assert await seed_games(session) == len(DEFAULT_GAMES)

        assert await seed_catalog(session) == 0
        assert await seed_games(session) == 0
