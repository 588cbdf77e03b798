"""GameRepository - SQLAlchemy implementation of GameRepository protocol."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.game import Game
from src.domain.enums import GameSortField, GameStatus, SortOrder
from src.domain.protocols.game_repository import GameFilters
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.catalog import (
    Genre as GenreModel,
    Platform as PlatformModel,
)
from src.infrastructure.persistence.models.game import (
    Game as GameModel,
    game_genres,
    game_platforms,
)
from src.infrastructure.persistence.models.review import Review as ReviewModel

_SORT_COLUMNS = {
    GameSortField.TITLE: GameModel.title,
    GameSortField.RELEASE_DATE: GameModel.release_date,
    GameSortField.AVERAGE_RATING: GameModel.average_rating,
    GameSortField.REVIEW_COUNT: GameModel.review_count,
    GameSortField.CREATED_AT: GameModel.created_at,
}


class GameRepository:
    """SQLAlchemy implementation of GameRepository protocol.

    Genres and platforms are many-to-many relationships loaded with
    ``selectin`` and exposed on the entity as id lists.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, game_id: UUID) -> Game | None:
        model = await self._get_model(game_id)
        return self._to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Game | None:
        stmt = select(GameModel).where(GameModel.slug == slug)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        stmt = select(GameModel.id).where(GameModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(GameModel.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list_games(
        self,
        filters: GameFilters,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[Game], int]:
        """List games matching ``filters``.

        Genre and platform filters match games having ANY of the given ids.
        """
        conditions = []
        if filters.search:
            pattern = f"%{filters.search}%"
            conditions.append(
                or_(GameModel.title.ilike(pattern), GameModel.description.ilike(pattern))
            )
        if filters.genre_ids:
            conditions.append(
                GameModel.id.in_(
                    select(game_genres.c.game_id).where(
                        game_genres.c.genre_id.in_(filters.genre_ids)
                    )
                )
            )
        if filters.platform_ids:
            conditions.append(
                GameModel.id.in_(
                    select(game_platforms.c.game_id).where(
                        game_platforms.c.platform_id.in_(filters.platform_ids)
                    )
                )
            )
        if filters.developer_id is not None:
            conditions.append(GameModel.developer_id == filters.developer_id)
        if filters.publisher_id is not None:
            conditions.append(GameModel.publisher_id == filters.publisher_id)
        if filters.status is not None:
            conditions.append(GameModel.status == filters.status.value)
        if filters.min_rating is not None:
            conditions.append(GameModel.average_rating >= filters.min_rating)
        if filters.max_rating is not None:
            conditions.append(GameModel.average_rating <= filters.max_rating)

        count_stmt = select(func.count()).select_from(GameModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        column = _SORT_COLUMNS[filters.sort_by]
        ordering = column.asc() if filters.sort_order == SortOrder.ASC else column.desc()
        stmt = (
            select(GameModel)
            .where(*conditions)
            .order_by(ordering, GameModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def find_similar(self, game: Game, limit: int) -> list[Game]:
        """Other games sharing at least one genre, best rated first."""
        if not game.genre_ids:
            return []
        stmt = (
            select(GameModel)
            .where(GameModel.id != game.id)
            .where(
                GameModel.id.in_(
                    select(game_genres.c.game_id).where(
                        game_genres.c.genre_id.in_(game.genre_ids)
                    )
                )
            )
            .order_by(GameModel.average_rating.desc(), GameModel.review_count.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, game: Game) -> None:
        """Create new game.

        Raises:
            DuplicateRecordError: If slug already exists.
        """
        model = GameModel(
            id=game.id,
            title=game.title,
            slug=game.slug,
            description=game.description,
            summary=game.summary,
            release_date=game.release_date,
            status=game.status.value,
            cover_image=game.cover_image,
            developer_id=game.developer_id,
            publisher_id=game.publisher_id,
            average_rating=game.average_rating,
            review_count=game.review_count,
            created_at=game.created_at,
            updated_at=game.updated_at,
        )
        model.genres = await self._load_genres(game.genre_ids)
        model.platforms = await self._load_platforms(game.platform_ids)
        self.session.add(model)
        await commit_or_raise_duplicate(self.session)
        await self.session.refresh(model)

    async def update(self, game: Game) -> None:
        """Update existing game (aggregates are left untouched)."""
        model = await self._get_model(game.id)
        if model is None:
            raise LookupError(f"Game {game.id} not found")

        model.title = game.title
        model.slug = game.slug
        model.description = game.description
        model.summary = game.summary
        model.release_date = game.release_date
        model.status = game.status.value
        model.cover_image = game.cover_image
        model.developer_id = game.developer_id
        model.publisher_id = game.publisher_id
        model.genres = await self._load_genres(game.genre_ids)
        model.platforms = await self._load_platforms(game.platform_ids)
        model.updated_at = game.updated_at

        await self.session.commit()
        await self.session.refresh(model)

    async def delete(self, game_id: UUID) -> None:
        await self.session.execute(delete(GameModel).where(GameModel.id == game_id))
        await self.session.commit()

    async def refresh_rating_stats(self, game_id: UUID) -> tuple[float, int]:
        """Recompute aggregates from published reviews.

        Returns:
            Tuple of (average_rating, review_count); average is 0 when there
            are no published reviews.
        """
        stmt = select(func.avg(ReviewModel.rating), func.count(ReviewModel.id)).where(
            ReviewModel.game_id == game_id,
            ReviewModel.is_published.is_(True),
        )
        average, count = (await self.session.execute(stmt)).one()
        average_rating = round(float(average), 2) if average is not None else 0.0

        model = await self._get_model(game_id)
        if model is not None:
            model.average_rating = average_rating
            model.review_count = count
            model.updated_at = datetime.now(UTC)
            await self.session.commit()
            await self.session.refresh(model)

        return average_rating, count

    async def _get_model(self, game_id: UUID) -> GameModel | None:
        stmt = select(GameModel).where(GameModel.id == game_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _load_genres(self, genre_ids: list[UUID]) -> list[GenreModel]:
        if not genre_ids:
            return []
        result = await self.session.execute(
            select(GenreModel).where(GenreModel.id.in_(genre_ids))
        )
        return list(result.scalars().all())

    async def _load_platforms(self, platform_ids: list[UUID]) -> list[PlatformModel]:
        if not platform_ids:
            return []
        result = await self.session.execute(
            select(PlatformModel).where(PlatformModel.id.in_(platform_ids))
        )
        return list(result.scalars().all())

    def _to_domain(self, model: GameModel) -> Game:
        """Convert database model to domain entity."""
        return Game(
            id=model.id,
            title=model.title,
            slug=model.slug,
            description=model.description,
            summary=model.summary,
            release_date=model.release_date,
            status=GameStatus(model.status),
            cover_image=model.cover_image,
            developer_id=model.developer_id,
            publisher_id=model.publisher_id,
            genre_ids=[genre.id for genre in model.genres],
            platform_ids=[platform.id for platform in model.platforms],
            average_rating=model.average_rating,
            review_count=model.review_count,
            created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
        )
