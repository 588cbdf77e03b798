"""FollowRepository - SQLAlchemy implementation of FollowRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from src.domain.entities.follow import Follow
from src.domain.entities.user import User
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.follow import Follow as FollowModel
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.repositories.user_repository import (
    user_model_to_domain,
)


class FollowRepository:
    """SQLAlchemy implementation of FollowRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, follower_id: UUID, following_id: UUID) -> bool:
        stmt = select(FollowModel.id).where(
            FollowModel.follower_id == follower_id,
            FollowModel.following_id == following_id,
        )
        return (await self.session.execute(stmt)).first() is not None

    async def save(self, follow: Follow) -> None:
        """Persist a follow edge.

        Raises:
            DuplicateRecordError: If the edge already exists.
        """
        self.session.add(
            FollowModel(
                id=follow.id,
                follower_id=follow.follower_id,
                following_id=follow.following_id,
                created_at=follow.created_at,
            )
        )
        await commit_or_raise_duplicate(self.session)

    async def delete(self, follower_id: UUID, following_id: UUID) -> bool:
        stmt = delete(FollowModel).where(
            FollowModel.follower_id == follower_id,
            FollowModel.following_id == following_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return bool(result.rowcount)

    async def count_followers(self, user_id: UUID) -> int:
        stmt = select(func.count(FollowModel.id)).where(
            FollowModel.following_id == user_id
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def count_following(self, user_id: UUID) -> int:
        stmt = select(func.count(FollowModel.id)).where(
            FollowModel.follower_id == user_id
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def list_followers(
        self, user_id: UUID, *, offset: int, limit: int
    ) -> tuple[list[User], int]:
        """Users following ``user_id``, most recent first."""
        stmt = (
            select(UserModel)
            .join(FollowModel, FollowModel.follower_id == UserModel.id)
            .where(FollowModel.following_id == user_id)
            .order_by(FollowModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        users = [user_model_to_domain(model) for model in result.scalars().all()]
        return users, await self.count_followers(user_id)

    async def list_following(
        self, user_id: UUID, *, offset: int, limit: int
    ) -> tuple[list[User], int]:
        """Users followed by ``user_id``, most recent first."""
        stmt = (
            select(UserModel)
            .join(FollowModel, FollowModel.following_id == UserModel.id)
            .where(FollowModel.follower_id == user_id)
            .order_by(FollowModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        users = [user_model_to_domain(model) for model in result.scalars().all()]
        return users, await self.count_following(user_id)

    async def following_ids(self, user_id: UUID) -> list[UUID]:
        stmt = select(FollowModel.following_id).where(FollowModel.follower_id == user_id)
        return list((await self.session.execute(stmt)).scalars().all())

    async def mutual_following_ids(self, user_id: UUID, other_id: UUID) -> list[UUID]:
        """Users followed by both ``user_id`` and ``other_id``."""
        theirs = select(FollowModel.following_id).where(
            FollowModel.follower_id == other_id
        )
        stmt = select(FollowModel.following_id).where(
            FollowModel.follower_id == user_id,
            FollowModel.following_id.in_(theirs),
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def suggest_for(self, user_id: UUID, limit: int) -> list[tuple[User, int]]:
        """Friends-of-friends ranked by how many of the user's follows follow them."""
        already_following = select(FollowModel.following_id).where(
            FollowModel.follower_id == user_id
        )
        second_hop = aliased(FollowModel)
        mutual = func.count(second_hop.id).label("mutual")
        ranked = (
            select(second_hop.following_id, mutual)
            .where(
                second_hop.follower_id.in_(already_following),
                second_hop.following_id != user_id,
                second_hop.following_id.not_in(already_following),
            )
            .group_by(second_hop.following_id)
            .order_by(mutual.desc(), second_hop.following_id)
            .limit(limit)
        )
        rows = (await self.session.execute(ranked)).all()
        if not rows:
            return []

        counts = {candidate_id: count for candidate_id, count in rows}
        users_stmt = select(UserModel).where(UserModel.id.in_(counts.keys()))
        models = (await self.session.execute(users_stmt)).scalars().all()
        by_id = {model.id: user_model_to_domain(model) for model in models}
        return [
            (by_id[candidate_id], count)
            for candidate_id, count in rows
            if candidate_id in by_id
        ]
