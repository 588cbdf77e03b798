"""Event handlers for infrastructure integration.

All handlers follow fail-open design: the event bus logs a handler failure
and keeps going.

Handlers:
    - LoggingEventHandler: Structured logging with appropriate severity levels
    - EmailEventHandler: Sends email notifications (stub - logs intent)
    - NotificationEventHandler: Persists in-app notifications
"""

from src.infrastructure.events.handlers.email_event_handler import EmailEventHandler
from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)

__all__ = [
    "EmailEventHandler",
    "LoggingEventHandler",
    "NotificationEventHandler",
]
