"""CommentRepository - SQLAlchemy implementation of CommentRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.comment import Comment
from src.domain.protocols.comment_repository import CommentView
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.comment import Comment as CommentModel
from src.infrastructure.persistence.models.user import User as UserModel


def _to_domain(model: CommentModel) -> Comment:
    return Comment(
        id=model.id,
        user_id=model.user_id,
        review_id=model.review_id,
        content=model.content,
        created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
        updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
    )


class CommentRepository:
    """SQLAlchemy implementation of CommentRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: UUID) -> Comment | None:
        stmt = select(CommentModel).where(CommentModel.id == comment_id)
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_for_review(
        self,
        review_id: UUID,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[CommentView], int]:
        """Comments on a review with author identity, oldest first."""
        count_stmt = select(func.count(CommentModel.id)).where(
            CommentModel.review_id == review_id
        )
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(
                CommentModel,
                UserModel.username,
                UserModel.display_name,
                UserModel.avatar,
            )
            .join(UserModel, UserModel.id == CommentModel.user_id)
            .where(CommentModel.review_id == review_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id)
            .offset(offset)
            .limit(limit)
        )
        rows = (await self.session.execute(stmt)).all()
        views = [
            CommentView(
                comment=_to_domain(model),
                author_username=username,
                author_display_name=display_name,
                author_avatar=avatar,
            )
            for model, username, display_name, avatar in rows
        ]
        return views, total

    async def save(self, comment: Comment) -> None:
        model = CommentModel(
            id=comment.id,
            user_id=comment.user_id,
            review_id=comment.review_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
        self.session.add(model)
        await self.session.commit()

    async def delete(self, comment_id: UUID) -> None:
        await self.session.execute(
            delete(CommentModel).where(CommentModel.id == comment_id)
        )
        await self.session.commit()
