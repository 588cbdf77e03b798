"""ReviewRepository and LikeRepository - SQLAlchemy implementations."""

from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.follow import ReviewLike
from src.domain.entities.review import Review
from src.domain.enums import ReviewSortField, SortOrder
from src.domain.protocols.review_repository import ReviewFilters, ReviewView
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.comment import Comment as CommentModel
from src.infrastructure.persistence.models.game import Game as GameModel
from src.infrastructure.persistence.models.review import (
    Review as ReviewModel,
    ReviewLike as ReviewLikeModel,
)
from src.infrastructure.persistence.models.user import User as UserModel

_likes_count = (
    select(func.count(ReviewLikeModel.id))
    .where(ReviewLikeModel.review_id == ReviewModel.id)
    .correlate(ReviewModel)
    .scalar_subquery()
)
_comments_count = (
    select(func.count(CommentModel.id))
    .where(CommentModel.review_id == ReviewModel.id)
    .correlate(ReviewModel)
    .scalar_subquery()
)

_SORT_COLUMNS: dict[ReviewSortField, Any] = {
    ReviewSortField.CREATED_AT: ReviewModel.created_at,
    ReviewSortField.UPDATED_AT: ReviewModel.updated_at,
    ReviewSortField.RATING: ReviewModel.rating,
    ReviewSortField.LIKES_COUNT: _likes_count,
}


def _to_domain(model: ReviewModel) -> Review:
    """Convert database model to domain entity."""
    return Review(
        id=model.id,
        user_id=model.user_id,
        game_id=model.game_id,
        title=model.title,
        content=model.content,
        rating=model.rating,
        is_published=model.is_published,
        is_spoiler=model.is_spoiler,
        created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
        updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
    )


def _view_query() -> Select[Any]:
    return (
        select(
            ReviewModel,
            UserModel.username,
            GameModel.title,
            GameModel.slug,
            _likes_count.label("likes_count"),
            _comments_count.label("comments_count"),
        )
        .join(UserModel, UserModel.id == ReviewModel.user_id)
        .join(GameModel, GameModel.id == ReviewModel.game_id)
    )


def _to_view(row: Any) -> ReviewView:
    model, username, game_title, game_slug, likes_count, comments_count = row
    return ReviewView(
        review=_to_domain(model),
        author_username=username,
        game_title=game_title,
        game_slug=game_slug,
        likes_count=likes_count or 0,
        comments_count=comments_count or 0,
    )


class ReviewRepository:
    """SQLAlchemy implementation of ReviewRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, review_id: UUID) -> Review | None:
        stmt = select(ReviewModel).where(ReviewModel.id == review_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def find_view(self, review_id: UUID) -> ReviewView | None:
        stmt = _view_query().where(ReviewModel.id == review_id)
        row = (await self.session.execute(stmt)).one_or_none()
        return _to_view(row) if row else None

    async def find_by_user_and_game(
        self, user_id: UUID, game_id: UUID
    ) -> Review | None:
        stmt = select(ReviewModel).where(
            ReviewModel.user_id == user_id,
            ReviewModel.game_id == game_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_reviews(
        self,
        filters: ReviewFilters,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[ReviewView], int]:
        """List reviews with author, game and engagement counts.

        Only published reviews are returned unless
        ``filters.include_unpublished_for`` names the author.
        """
        conditions: list[Any] = []
        if filters.game_id is not None:
            conditions.append(ReviewModel.game_id == filters.game_id)
        if filters.user_id is not None:
            conditions.append(ReviewModel.user_id == filters.user_id)
        if filters.user_ids:
            conditions.append(ReviewModel.user_id.in_(filters.user_ids))
        if filters.min_rating is not None:
            conditions.append(ReviewModel.rating >= filters.min_rating)
        if filters.max_rating is not None:
            conditions.append(ReviewModel.rating <= filters.max_rating)
        if filters.include_unpublished_for is not None:
            conditions.append(
                or_(
                    ReviewModel.is_published.is_(True),
                    ReviewModel.user_id == filters.include_unpublished_for,
                )
            )
        else:
            conditions.append(ReviewModel.is_published.is_(True))

        count_stmt = select(func.count()).select_from(ReviewModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        column = _SORT_COLUMNS[filters.sort_by]
        ordering = column.asc() if filters.sort_order == SortOrder.ASC else column.desc()
        stmt = (
            _view_query()
            .where(*conditions)
            .order_by(ordering, ReviewModel.id)
            .offset(offset)
            .limit(limit)
        )
        rows = (await self.session.execute(stmt)).all()
        return [_to_view(row) for row in rows], total

    async def count_published_by_user(self, user_id: UUID) -> int:
        stmt = select(func.count(ReviewModel.id)).where(
            ReviewModel.user_id == user_id,
            ReviewModel.is_published.is_(True),
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def count_likes_received(self, user_id: UUID) -> int:
        stmt = (
            select(func.count(ReviewLikeModel.id))
            .join(ReviewModel, ReviewModel.id == ReviewLikeModel.review_id)
            .where(
                ReviewModel.user_id == user_id,
                ReviewModel.is_published.is_(True),
            )
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def save(self, review: Review) -> None:
        """Create new review.

        Raises:
            DuplicateRecordError: If the user already reviewed the game.
        """
        model = ReviewModel(
            id=review.id,
            user_id=review.user_id,
            game_id=review.game_id,
            title=review.title,
            content=review.content,
            rating=review.rating,
            is_published=review.is_published,
            is_spoiler=review.is_spoiler,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
        self.session.add(model)
        await commit_or_raise_duplicate(self.session)
        await self.session.refresh(model)

    async def update(self, review: Review) -> None:
        stmt = select(ReviewModel).where(ReviewModel.id == review.id)
        model = (await self.session.execute(stmt)).scalar_one()

        model.title = review.title
        model.content = review.content
        model.rating = review.rating
        model.is_published = review.is_published
        model.is_spoiler = review.is_spoiler
        model.updated_at = review.updated_at

        await self.session.commit()
        await self.session.refresh(model)

    async def delete(self, review_id: UUID) -> None:
        await self.session.execute(delete(ReviewModel).where(ReviewModel.id == review_id))
        await self.session.commit()


class LikeRepository:
    """SQLAlchemy implementation of LikeRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, user_id: UUID, review_id: UUID) -> bool:
        stmt = select(ReviewLikeModel.id).where(
            ReviewLikeModel.user_id == user_id,
            ReviewLikeModel.review_id == review_id,
        )
        return (await self.session.execute(stmt)).first() is not None

    async def save(self, like: ReviewLike) -> None:
        """Persist a like.

        Raises:
            DuplicateRecordError: If the user already liked the review.
        """
        self.session.add(
            ReviewLikeModel(
                id=like.id,
                user_id=like.user_id,
                review_id=like.review_id,
                created_at=like.created_at,
            )
        )
        await commit_or_raise_duplicate(self.session)

    async def delete(self, user_id: UUID, review_id: UUID) -> bool:
        stmt = delete(ReviewLikeModel).where(
            ReviewLikeModel.user_id == user_id,
            ReviewLikeModel.review_id == review_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return bool(result.rowcount)

    async def liked_review_ids(
        self, user_id: UUID, review_ids: list[UUID]
    ) -> set[UUID]:
        if not review_ids:
            return set()
        stmt = select(ReviewLikeModel.review_id).where(
            ReviewLikeModel.user_id == user_id,
            ReviewLikeModel.review_id.in_(review_ids),
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
