"""Notification queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListNotifications:
    user_id: UUID
    unread_only: bool = False
    page: int = 1
    limit: int = 20
