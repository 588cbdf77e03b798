# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing.
Configures all event handlers and subscriptions at startup using
registry-driven auto-wiring.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Event handlers are registered at startup from EVENT_REGISTRY. For each
    registered event this factory:
        1. Computes the handler method name from workflow_name + phase
        2. Subscribes handlers based on the metadata.requires_* flags

    A registry entry whose handler method is missing is a wiring bug, so
    startup fails immediately instead of silently dropping the event.

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: If a handler lacks the method a registry entry needs.

    Usage:
        # Presentation Layer (FastAPI Depends)
        from fastapi import Depends
        event_bus: EventBusProtocol = Depends(get_event_bus)
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_database, get_logger
    from src.domain.events.registry import EVENT_REGISTRY
    from src.infrastructure.events.handlers.email_event_handler import EmailEventHandler
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.handlers.notification_event_handler import (
        NotificationEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    email_handler = EmailEventHandler(logger=logger, settings=get_settings())
    notification_handler = NotificationEventHandler(
        database=get_database(), logger=logger
    )

    subscriptions = 0
    for metadata in EVENT_REGISTRY:
        method_name = metadata.handler_method_name
        targets = []
        if metadata.requires_logging:
            targets.append(logging_handler)
        if metadata.requires_email:
            targets.append(email_handler)
        if metadata.requires_notification:
            targets.append(notification_handler)

        for target in targets:
            handler_method = getattr(target, method_name, None)
            if handler_method is None:
                raise RuntimeError(
                    f"{type(target).__name__} is missing {method_name} "
                    f"required by {metadata.event_class.__name__}"
                )
            event_bus.subscribe(metadata.event_class, handler_method)
            subscriptions += 1

    logger.info(
        "event_bus_configured",
        events=len(EVENT_REGISTRY),
        subscriptions=subscriptions,
    )
    return event_bus
