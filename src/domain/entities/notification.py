"""Notification domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from src.domain.enums import NotificationType


@dataclass
class Notification:
    """In-app notification addressed to one user.

    Attributes:
        data: Event-specific payload (e.g. ``{"review_id": "..."}``) used by
            clients to build links.
    """

    id: UUID
    user_id: UUID
    type: NotificationType
    title: str
    message: str
    is_read: bool = False
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def mark_read(self) -> None:
        self.is_read = True
