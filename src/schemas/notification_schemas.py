"""Notification schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities.notification import Notification
from src.domain.enums import NotificationType
from src.schemas.common_schemas import PaginationMeta


class NotificationResponse(BaseModel):
    id: UUID
    type: NotificationType
    title: str
    message: str
    is_read: bool
    data: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            is_read=notification.is_read,
            data=notification.data,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    """Paginated notifications plus the caller's total unread count."""

    items: list[NotificationResponse]
    meta: PaginationMeta
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int
