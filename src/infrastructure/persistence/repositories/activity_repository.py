"""ActivityRepository - merged feed of published reviews and follows.

Both sources are fetched newest first up to ``offset + limit`` rows, merged
in memory and sliced. Totals are the sum of both source counts.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from src.domain.enums import ActivityType
from src.domain.protocols.activity_repository import Activity
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.follow import Follow as FollowModel
from src.infrastructure.persistence.models.game import Game as GameModel
from src.infrastructure.persistence.models.review import Review as ReviewModel
from src.infrastructure.persistence.models.user import User as UserModel


class ActivityRepository:
    """SQLAlchemy implementation of ActivityRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_activity(
        self,
        actor_ids: list[UUID],
        types: list[ActivityType],
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[Activity], int]:
        if not actor_ids or not types:
            return [], 0

        window = offset + limit
        activities: list[Activity] = []
        total = 0

        if ActivityType.REVIEW in types:
            reviews, review_total = await self._review_activity(actor_ids, window)
            activities.extend(reviews)
            total += review_total
        if ActivityType.FOLLOW in types:
            follows, follow_total = await self._follow_activity(actor_ids, window)
            activities.extend(follows)
            total += follow_total

        activities.sort(key=lambda activity: activity.created_at, reverse=True)
        return activities[offset:window], total

    async def _review_activity(
        self, actor_ids: list[UUID], window: int
    ) -> tuple[list[Activity], int]:
        conditions = (
            ReviewModel.user_id.in_(actor_ids),
            ReviewModel.is_published.is_(True),
        )
        total = (
            await self.session.execute(
                select(func.count(ReviewModel.id)).where(*conditions)
            )
        ).scalar_one()

        stmt = (
            select(
                ReviewModel.id,
                ReviewModel.title,
                ReviewModel.rating,
                ReviewModel.created_at,
                ReviewModel.user_id,
                UserModel.username,
                GameModel.id,
                GameModel.title,
                GameModel.slug,
            )
            .join(UserModel, UserModel.id == ReviewModel.user_id)
            .join(GameModel, GameModel.id == ReviewModel.game_id)
            .where(*conditions)
            .order_by(ReviewModel.created_at.desc())
            .limit(window)
        )
        rows = (await self.session.execute(stmt)).all()
        activities = [
            Activity(
                type=ActivityType.REVIEW,
                actor_id=user_id,
                actor_username=username,
                created_at=ensure_utc(created_at),  # type: ignore[arg-type]
                review_id=review_id,
                review_title=review_title,
                rating=rating,
                game_id=game_id,
                game_title=game_title,
                game_slug=game_slug,
            )
            for (
                review_id,
                review_title,
                rating,
                created_at,
                user_id,
                username,
                game_id,
                game_title,
                game_slug,
            ) in rows
        ]
        return activities, total

    async def _follow_activity(
        self, actor_ids: list[UUID], window: int
    ) -> tuple[list[Activity], int]:
        condition = FollowModel.follower_id.in_(actor_ids)
        total = (
            await self.session.execute(
                select(func.count(FollowModel.id)).where(condition)
            )
        ).scalar_one()

        follower = aliased(UserModel)
        target = aliased(UserModel)
        stmt = (
            select(
                FollowModel.created_at,
                follower.id,
                follower.username,
                target.id,
                target.username,
            )
            .join(follower, follower.id == FollowModel.follower_id)
            .join(target, target.id == FollowModel.following_id)
            .where(condition)
            .order_by(FollowModel.created_at.desc())
            .limit(window)
        )
        rows = (await self.session.execute(stmt)).all()
        activities = [
            Activity(
                type=ActivityType.FOLLOW,
                actor_id=actor_id,
                actor_username=actor_username,
                created_at=ensure_utc(created_at),  # type: ignore[arg-type]
                target_user_id=target_id,
                target_username=target_username,
            )
            for created_at, actor_id, actor_username, target_id, target_username in rows
        ]
        return activities, total
