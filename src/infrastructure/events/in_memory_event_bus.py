"""In-memory event bus implementation.

Implements EventBusProtocol using an in-memory dictionary-based registry.
Suitable for a single-process deployment.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type → list of handlers)
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent handler execution (asyncio.gather)

Usage:
    >>> @lru_cache()
    >>> def get_event_bus() -> EventBusProtocol:
    ...     return InMemoryEventBus(logger=get_logger())
    >>>
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(UserFollowed, notification_handler.handle_user_followed)
    >>> await event_bus.publish(UserFollowed(...), metadata={"ip_address": "..."})
"""

import asyncio
from collections import defaultdict
from uuid import UUID

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Executes handlers concurrently with asyncio.gather. Handler exceptions
    are logged but never propagated to the publisher.

    Request metadata passed to ``publish`` is available to handlers through
    ``get_metadata(event.event_id)`` while the event is being dispatched.

    Thread Safety:
        - NOT thread-safe (single-threaded async design)

    Attributes:
        _handlers: Dictionary mapping event types to list of async handlers.
        _metadata: Request metadata of in-flight events, keyed by event_id.
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._metadata: dict[UUID, dict[str, str]] = {}
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches
                (no inheritance matching).
            handler: Async function accepting the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    async def publish(
        self,
        event: DomainEvent,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Look up handlers for type(event)
            2. If no handlers, return immediately (no-op)
            3. Execute all handlers with asyncio.gather(return_exceptions=True)
            4. Log any handler exceptions (warning level)
            5. Return (never raise exceptions)
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        if metadata:
            self._metadata[event.event_id] = metadata

        try:
            results = await asyncio.gather(
                *(handler(event) for handler in handlers),
                return_exceptions=True,
            )
        finally:
            self._metadata.pop(event.event_id, None)

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                handler_name = getattr(handlers[idx], "__name__", repr(handlers[idx]))
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=handler_name,
                    error_type=type(result).__name__,
                    error_message=str(result),
                )

    def get_metadata(self, event_id: object) -> dict[str, str]:
        """Request metadata recorded for an in-flight event (empty if none)."""
        if not isinstance(event_id, UUID):
            return {}
        return dict(self._metadata.get(event_id, {}))
