"""Registry compliance tests for domain events.

EVENT_REGISTRY drives container wiring, so every flagged handler must
implement the method the registry derives for each event.
"""

import pytest

from src.domain.events.base_event import DomainEvent
from src.domain.events.registry import (
    EVENT_REGISTRY,
    WorkflowPhase,
    get_all_events,
    get_events_requiring_handler,
)
from src.infrastructure.events.handlers.email_event_handler import EmailEventHandler
from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)


@pytest.mark.unit
class TestEventRegistryCompliance:
    def test_event_classes_are_unique(self):
        classes = [metadata.event_class for metadata in EVENT_REGISTRY]

        assert len(classes) == len(set(classes))

    def test_all_events_are_domain_events(self):
        for metadata in EVENT_REGISTRY:
            assert issubclass(metadata.event_class, DomainEvent)

    @pytest.mark.parametrize(
        ("flag", "handler_class"),
        [
            ("requires_logging", LoggingEventHandler),
            ("requires_email", EmailEventHandler),
            ("requires_notification", NotificationEventHandler),
        ],
    )
    def test_handlers_implement_required_methods(self, flag, handler_class):
        missing = [
            metadata.handler_method_name
            for metadata in EVENT_REGISTRY
            if getattr(metadata, flag)
            and not hasattr(handler_class, metadata.handler_method_name)
        ]

        assert not missing, f"{handler_class.__name__} is missing: {missing}"

    def test_handler_method_names(self):
        by_class = {m.event_class.__name__: m for m in EVENT_REGISTRY}

        assert (
            by_class["UserLoginFailed"].handler_method_name
            == "handle_user_login_failed"
        )
        assert by_class["UserFollowed"].phase is WorkflowPhase.OPERATIONAL
        assert by_class["UserFollowed"].handler_method_name == "handle_user_followed"

    def test_social_events_notify(self):
        notifying = {
            m.event_class.__name__ for m in EVENT_REGISTRY if m.requires_notification
        }

        assert notifying == {"UserFollowed", "ReviewLiked", "CommentAdded"}

    def test_reset_request_sends_email(self):
        emailing = {m.event_class.__name__ for m in EVENT_REGISTRY if m.requires_email}

        assert "PasswordResetRequestSucceeded" in emailing

    def test_lookup_helpers(self):
        assert len(get_all_events()) == len(EVENT_REGISTRY)
        assert {m.event_class for m in get_events_requiring_handler("email")} == {
            m.event_class for m in EVENT_REGISTRY if m.requires_email
        }
        with pytest.raises(ValueError):
            get_events_requiring_handler("sms")
