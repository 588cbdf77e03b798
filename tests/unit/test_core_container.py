"""Unit tests for the dependency container.

Verifies app-scoped singletons and the registry-driven event bus wiring.
"""

import pytest

from src.core.container import (
    get_event_bus,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.domain.events.registry import EVENT_REGISTRY


@pytest.mark.unit
class TestAppScopedSingletons:
    def test_factories_are_cached(self):
        assert get_logger() is get_logger()
        assert get_password_service() is get_password_service()
        assert get_token_service() is get_token_service()
        assert get_event_bus() is get_event_bus()


@pytest.mark.unit
class TestEventBusWiring:
    def test_every_registered_event_has_subscribers(self):
        bus = get_event_bus()

        for metadata in EVENT_REGISTRY:
            assert bus._handlers[metadata.event_class], (
                f"{metadata.event_class.__name__} has no subscribers"
            )

    def test_subscription_count_follows_registry_flags(self):
        bus = get_event_bus()

        for metadata in EVENT_REGISTRY:
            expected = sum(
                [
                    metadata.requires_logging,
                    metadata.requires_email,
                    metadata.requires_notification,
                ]
            )
            assert len(bus._handlers[metadata.event_class]) == expected

    def test_notification_events_reach_notification_handler(self):
        bus = get_event_bus()

        for metadata in EVENT_REGISTRY:
            owners = {
                type(handler.__self__).__name__
                for handler in bus._handlers[metadata.event_class]
            }
            assert ("NotificationEventHandler" in owners) == (
                metadata.requires_notification
            )
