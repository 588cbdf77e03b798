"""NotificationRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.notification import Notification


class NotificationRepository(Protocol):
    """Notification repository protocol (port)."""

    async def save(self, notification: Notification) -> None:
        ...

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        ...

    async def list_for_user(
        self,
        user_id: UUID,
        *,
        unread_only: bool,
        offset: int,
        limit: int,
    ) -> tuple[list[Notification], int]:
        """Notifications for ``user_id``, newest first."""
        ...

    async def count_unread(self, user_id: UUID) -> int:
        ...

    async def mark_read(self, notification_id: UUID) -> None:
        ...

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification read.

        Returns:
            Number of notifications updated.
        """
        ...
