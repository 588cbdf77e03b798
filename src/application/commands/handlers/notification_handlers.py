"""Notification command handlers."""

from src.application.commands.notification_commands import (
    MarkAllNotificationsRead,
    MarkNotificationRead,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols import NotificationRepository


class NotificationError:
    NOTIFICATION_NOT_FOUND = "Notification not found"


class MarkNotificationReadHandler:
    """Mark one notification read. Other users' notifications look missing."""

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(self, cmd: MarkNotificationRead) -> Result[None, str]:
        notification = await self._notification_repo.find_by_id(cmd.notification_id)
        if notification is None or notification.user_id != cmd.user_id:
            return Failure(error=NotificationError.NOTIFICATION_NOT_FOUND)

        if not notification.is_read:
            await self._notification_repo.mark_read(notification.id)
        return Success(value=None)


class MarkAllNotificationsReadHandler:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    async def handle(self, cmd: MarkAllNotificationsRead) -> Result[int, str]:
        """Returns Success(number of notifications updated)."""
        updated = await self._notification_repo.mark_all_read(cmd.user_id)
        return Success(value=updated)
