"""Notification DTOs."""

from dataclasses import dataclass

from src.application.dtos.pagination import Page
from src.domain.entities.notification import Notification


@dataclass(frozen=True, kw_only=True)
class NotificationList:
    page: Page[Notification]
    unread_count: int
