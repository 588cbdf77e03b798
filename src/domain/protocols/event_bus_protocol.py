"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements the adapter (InMemoryEventBus)

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserFollowed, notification_handler.handle_user_followed)
    >>> await event_bus.publish(UserFollowed(follower_id=..., following_id=...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Async callable receiving a single event
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. Fail-open: one handler failure must NOT prevent other handlers
           from executing and must never propagate to the publisher.
        2. Handlers registered for an event type only receive events of that
           exact type.
        3. No ordering guarantees between handlers.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register ``handler`` for ``event_type``."""
        ...

    async def publish(
        self,
        event: DomainEvent,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Publish event to all registered handlers.

        Args:
            event: Domain event to publish.
            metadata: Optional request metadata (ip_address, user_agent) that
                handlers may read via ``get_metadata``.
        """
        ...

    def get_metadata(self, event_id: object) -> dict[str, str]:
        """Return request metadata recorded for an in-flight event."""
        ...
