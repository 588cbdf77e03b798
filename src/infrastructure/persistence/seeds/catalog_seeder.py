"""Demo catalog seeder.

Seeds genres, platforms, developers, publishers and a handful of well-known
games so a fresh development database has something to browse and review.
Idempotent via slug existence checks; safe to run repeatedly.

Games are seeded without reviews, so their rating stats start at zero and
follow the published reviews members write.
"""

from datetime import date
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.domain.entities.catalog import Developer, Genre, Platform, Publisher
from src.domain.entities.game import Game
from src.domain.enums import GameStatus
from src.domain.protocols import CatalogKind
from src.domain.validators import slugify
from src.infrastructure.persistence.repositories import (
    CatalogRepository,
    GameRepository,
)

logger = structlog.get_logger(__name__)

DEFAULT_GENRES: list[dict[str, Any]] = [
    {"name": "Action", "description": "Fast-paced games with physical challenges"},
    {"name": "Adventure", "description": "Exploration and puzzle-solving games"},
    {
        "name": "Role-Playing",
        "description": "Character development and story-driven games",
    },
    {"name": "Strategy", "description": "Tactical and strategic thinking games"},
    {"name": "Simulation", "description": "Real-world activity simulation games"},
    {"name": "Puzzle", "description": "Logic and problem-solving games"},
    {"name": "Sports", "description": "Athletic competition simulation games"},
    {"name": "Racing", "description": "Vehicle racing and driving games"},
    {"name": "Shooter", "description": "Combat games focusing on ranged weapons"},
    {"name": "Indie", "description": "Independent developer games"},
]

DEFAULT_PLATFORMS: list[dict[str, Any]] = [
    {"name": "PC", "abbreviation": "PC"},
    {"name": "PlayStation 5", "abbreviation": "PS5"},
    {"name": "Xbox Series X/S", "abbreviation": "XBOX"},
    {"name": "Nintendo Switch", "abbreviation": "NSW"},
    {"name": "PlayStation 4", "abbreviation": "PS4"},
    {"name": "Xbox One", "abbreviation": "XONE"},
    {"name": "iOS", "abbreviation": "iOS"},
    {"name": "Android", "abbreviation": "AND"},
]

DEFAULT_DEVELOPERS: list[dict[str, Any]] = [
    {
        "name": "CD Projekt RED",
        "description": "Polish developer of The Witcher series and Cyberpunk 2077",
        "country": "Poland",
        "founded_year": 1994,
        "website": "https://www.cdprojektred.com",
    },
    {
        "name": "FromSoftware",
        "description": "Japanese developer known for challenging action RPGs",
        "country": "Japan",
        "founded_year": 1986,
        "website": "https://www.fromsoftware.jp",
    },
    {
        "name": "Naughty Dog",
        "description": "American developer of cinematic action-adventure games",
        "country": "United States",
        "founded_year": 1984,
        "website": "https://www.naughtydog.com",
    },
    {
        "name": "Nintendo EPD",
        "description": "Nintendo's internal development division",
        "country": "Japan",
        "founded_year": 2015,
        "website": "https://www.nintendo.com",
    },
    {
        "name": "Indie Studio",
        "description": "Sample indie developer for showcase features",
        "founded_year": 2020,
    },
]

DEFAULT_PUBLISHERS: list[dict[str, Any]] = [
    {"name": "CD Projekt", "description": "Polish video game publisher and distributor"},
    {
        "name": "Bandai Namco Entertainment",
        "description": "Japanese multinational video game publisher",
    },
    {
        "name": "Sony Interactive Entertainment",
        "description": "Sony's video game division",
    },
    {"name": "Nintendo", "description": "Japanese multinational video game company"},
]

# Catalog references are the derived slugs of the entries above
DEFAULT_GAMES: list[dict[str, Any]] = [
    {
        "title": "The Witcher 3: Wild Hunt",
        "summary": "An open-world RPG following Geralt of Rivia on his quest to "
        "find his adopted daughter.",
        "release_date": date(2015, 5, 19),
        "developer": "cd-projekt-red",
        "publisher": "cd-projekt",
        "genres": ["role-playing", "adventure", "action"],
        "platforms": ["pc", "playstation-4", "xbox-one", "nintendo-switch"],
    },
    {
        "title": "Elden Ring",
        "summary": "FromSoftware's largest game yet, an open world created in "
        "collaboration with George R.R. Martin.",
        "release_date": date(2022, 2, 25),
        "developer": "fromsoftware",
        "publisher": "bandai-namco-entertainment",
        "genres": ["role-playing", "action", "adventure"],
        "platforms": ["pc", "playstation-5", "xbox-series-x-s", "playstation-4"],
    },
    {
        "title": "The Last of Us Part II",
        "summary": "A post-apocalyptic adventure following Ellie's journey of "
        "revenge and redemption.",
        "release_date": date(2020, 6, 19),
        "developer": "naughty-dog",
        "publisher": "sony-interactive-entertainment",
        "genres": ["action", "adventure"],
        "platforms": ["playstation-4", "playstation-5", "pc"],
    },
    {
        "title": "Super Mario Odyssey",
        "summary": "Mario's 3D platforming adventure built around cap-throwing.",
        "release_date": date(2017, 10, 27),
        "developer": "nintendo-epd",
        "publisher": "nintendo",
        "genres": ["adventure", "action"],
        "platforms": ["nintendo-switch"],
    },
    {
        "title": "Indie Puzzle Adventure",
        "summary": "A hand-drawn puzzle adventure showcasing indie creativity.",
        "release_date": date(2023, 3, 15),
        "developer": "indie-studio",
        "publisher": None,
        "genres": ["puzzle", "indie", "adventure"],
        "platforms": ["pc", "nintendo-switch"],
    },
]

_CATALOG: list[tuple[CatalogKind, type, list[dict[str, Any]]]] = [
    (CatalogKind.GENRE, Genre, DEFAULT_GENRES),
    (CatalogKind.PLATFORM, Platform, DEFAULT_PLATFORMS),
    (CatalogKind.DEVELOPER, Developer, DEFAULT_DEVELOPERS),
    (CatalogKind.PUBLISHER, Publisher, DEFAULT_PUBLISHERS),
]


async def seed_catalog(session: AsyncSession) -> int:
    """Seed genres, platforms, developers and publishers.

    Returns:
        Number of entries created.
    """
    repo = CatalogRepository(session)
    seeded_count = 0

    for kind, entity, entries in _CATALOG:
        for data in entries:
            slug = slugify(data["name"])
            if await repo.slug_exists(kind, slug):
                logger.debug("catalog_entry_exists", kind=kind.value, slug=slug)
                continue
            await repo.save(kind, entity(id=uuid7(), slug=slug, **data))
            seeded_count += 1

    logger.info("catalog_seeded", seeded=seeded_count)
    return seeded_count


async def seed_games(session: AsyncSession) -> int:
    """Seed demo games linked to the seeded catalog.

    Run after seed_catalog; catalog slugs that do not exist are skipped.

    Returns:
        Number of games created.
    """
    catalog = CatalogRepository(session)
    ids_by_slug = {
        kind: {entry.slug: entry.id for entry in await catalog.list_entries(kind)}
        for kind, _, _ in _CATALOG
    }

    def _ids(kind: CatalogKind, slugs: list[str]) -> list:
        return [ids_by_slug[kind][s] for s in slugs if s in ids_by_slug[kind]]

    repo = GameRepository(session)
    seeded_count = 0

    for data in DEFAULT_GAMES:
        slug = slugify(data["title"])
        if await repo.slug_exists(slug):
            logger.debug("game_exists", slug=slug)
            continue
        await repo.save(
            Game(
                id=uuid7(),
                title=data["title"],
                slug=slug,
                summary=data["summary"],
                release_date=data["release_date"],
                status=GameStatus.RELEASED,
                developer_id=ids_by_slug[CatalogKind.DEVELOPER].get(data["developer"]),
                publisher_id=ids_by_slug[CatalogKind.PUBLISHER].get(data["publisher"]),
                genre_ids=_ids(CatalogKind.GENRE, data["genres"]),
                platform_ids=_ids(CatalogKind.PLATFORM, data["platforms"]),
            )
        )
        seeded_count += 1

    logger.info("games_seeded", seeded=seeded_count)
    return seeded_count
