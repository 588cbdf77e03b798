"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: Event bus with fail-open behavior

Event Handlers (``src.infrastructure.events.handlers``):
    - LoggingEventHandler: Structured logging for domain events
    - EmailEventHandler: Email notifications (stub, logs intent)
    - NotificationEventHandler: In-app notifications for social events

Usage:
    >>> from src.infrastructure.events import InMemoryEventBus
    >>> event_bus = InMemoryEventBus(logger=logger)
    >>> event_bus.subscribe(UserFollowed, notification_handler.handle_user_followed)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
