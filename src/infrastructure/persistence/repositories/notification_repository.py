"""NotificationRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.notification import Notification
from src.domain.enums import NotificationType
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.notification import (
    Notification as NotificationModel,
)


def _to_domain(model: NotificationModel) -> Notification:
    return Notification(
        id=model.id,
        user_id=model.user_id,
        type=NotificationType(model.type),
        title=model.title,
        message=model.message,
        is_read=model.is_read,
        data=dict(model.data or {}),
        created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
    )


class NotificationRepository:
    """SQLAlchemy implementation of NotificationRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> None:
        self.session.add(
            NotificationModel(
                id=notification.id,
                user_id=notification.user_id,
                type=notification.type.value,
                title=notification.title,
                message=notification.message,
                is_read=notification.is_read,
                data=notification.data,
                created_at=notification.created_at,
            )
        )
        await self.session.commit()

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        stmt = select(NotificationModel).where(NotificationModel.id == notification_id)
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        unread_only: bool,
        offset: int,
        limit: int,
    ) -> tuple[list[Notification], int]:
        conditions = [NotificationModel.user_id == user_id]
        if unread_only:
            conditions.append(NotificationModel.is_read.is_(False))

        count_stmt = select(func.count(NotificationModel.id)).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(NotificationModel)
            .where(*conditions)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()], total

    async def count_unread(self, user_id: UUID) -> int:
        stmt = select(func.count(NotificationModel.id)).where(
            NotificationModel.user_id == user_id,
            NotificationModel.is_read.is_(False),
        )
        return (await self.session.execute(stmt)).scalar_one()

    async def mark_read(self, notification_id: UUID) -> None:
        await self.session.execute(
            update(NotificationModel)
            .where(NotificationModel.id == notification_id)
            .values(is_read=True)
        )
        await self.session.commit()

    async def mark_all_read(self, user_id: UUID) -> int:
        result = await self.session.execute(
            update(NotificationModel)
            .where(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .values(is_read=True)
        )
        await self.session.commit()
        return result.rowcount or 0
