"""Game catalog query handlers."""

from src.application.dtos.game_dtos import GameDetail
from src.application.dtos.pagination import Page, page_offset
from src.application.queries.game_queries import (
    GetGame,
    ListCatalogEntries,
    ListGames,
    ListSimilarGames,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.game import Game
from src.domain.protocols import (
    CatalogEntry,
    CatalogKind,
    CatalogRepository,
    GameFilters,
    GameRepository,
    ReviewFilters,
    ReviewRepository,
)

GAME_RECENT_REVIEWS = 5


class GameQueryError:
    GAME_NOT_FOUND = "Game not found"


class ListGamesHandler:
    def __init__(self, game_repo: GameRepository) -> None:
        self._game_repo = game_repo

    async def handle(self, query: ListGames) -> Result[Page[Game], str]:
        filters = GameFilters(
            search=query.search,
            genre_ids=[query.genre_id] if query.genre_id else [],
            platform_ids=[query.platform_id] if query.platform_id else [],
            developer_id=query.developer_id,
            publisher_id=query.publisher_id,
            status=query.status,
            min_rating=query.min_rating,
            max_rating=query.max_rating,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        games, total = await self._game_repo.list_games(
            filters,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )
        return Success(
            value=Page(items=games, total=total, page=query.page, limit=query.limit)
        )


class GetGameHandler:
    """Game detail: resolved catalog references plus latest published reviews."""

    def __init__(
        self,
        game_repo: GameRepository,
        catalog_repo: CatalogRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._game_repo = game_repo
        self._catalog_repo = catalog_repo
        self._review_repo = review_repo

    async def handle(self, query: GetGame) -> Result[GameDetail, str]:
        game = await self._game_repo.find_by_slug(query.slug)
        if game is None:
            return Failure(error=GameQueryError.GAME_NOT_FOUND)

        developers = (
            await self._catalog_repo.find_by_ids(
                CatalogKind.DEVELOPER, [game.developer_id]
            )
            if game.developer_id
            else []
        )
        publishers = (
            await self._catalog_repo.find_by_ids(
                CatalogKind.PUBLISHER, [game.publisher_id]
            )
            if game.publisher_id
            else []
        )
        genres = await self._catalog_repo.find_by_ids(CatalogKind.GENRE, game.genre_ids)
        platforms = await self._catalog_repo.find_by_ids(
            CatalogKind.PLATFORM, game.platform_ids
        )
        recent_reviews, _ = await self._review_repo.list_reviews(
            ReviewFilters(game_id=game.id), offset=0, limit=GAME_RECENT_REVIEWS
        )

        return Success(
            value=GameDetail(
                game=game,
                developer=developers[0] if developers else None,  # type: ignore[arg-type]
                publisher=publishers[0] if publishers else None,  # type: ignore[arg-type]
                genres=sorted(genres, key=lambda g: g.name),  # type: ignore[arg-type]
                platforms=sorted(platforms, key=lambda p: p.name),  # type: ignore[arg-type]
                recent_reviews=recent_reviews,
            )
        )


class ListSimilarGamesHandler:
    """Other games sharing at least one genre, best rated first."""

    def __init__(self, game_repo: GameRepository) -> None:
        self._game_repo = game_repo

    async def handle(self, query: ListSimilarGames) -> Result[list[Game], str]:
        game = await self._game_repo.find_by_id(query.game_id)
        if game is None:
            return Failure(error=GameQueryError.GAME_NOT_FOUND)
        if not game.genre_ids:
            return Success(value=[])
        return Success(value=await self._game_repo.find_similar(game, query.limit))


class ListCatalogEntriesHandler:
    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, query: ListCatalogEntries) -> Result[list[CatalogEntry], str]:
        return Success(value=await self._catalog_repo.list_entries(query.kind))
