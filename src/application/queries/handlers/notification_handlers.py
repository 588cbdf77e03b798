"""Notification query handlers."""

from src.application.dtos.notification_dtos import NotificationList
from src.application.dtos.pagination import Page, page_offset
from src.application.queries.notification_queries import ListNotifications
from src.core.result import Result, Success
from src.domain.protocols import NotificationRepository


class ListNotificationsHandler:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(self, query: ListNotifications) -> Result[NotificationList, str]:
        notifications, total = await self._notification_repo.list_for_user(
            query.user_id,
            unread_only=query.unread_only,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )
        unread_count = await self._notification_repo.count_unread(query.user_id)
        return Success(
            value=NotificationList(
                page=Page(
                    items=notifications,
                    total=total,
                    page=query.page,
                    limit=query.limit,
                ),
                unread_count=unread_count,
            )
        )
