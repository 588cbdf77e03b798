"""Notification commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class MarkNotificationRead:
    """Mark one notification read (recipient only)."""

    notification_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class MarkAllNotificationsRead:
    user_id: UUID
