"""Unit tests for InMemoryEventBus and the email event handler."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from src.core.config import get_settings
from src.domain.events.auth_events import PasswordResetRequestSucceeded
from src.domain.events.social_events import UserFollowed, UserUnfollowed
from src.infrastructure.events.handlers.email_event_handler import EmailEventHandler
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus


def _followed() -> UserFollowed:
    return UserFollowed(
        follower_id=uuid7(),
        follower_username="ana",
        following_id=uuid7(),
    )


@pytest.mark.unit
class TestInMemoryEventBus:
    async def test_publish_without_handlers_is_noop(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger=logger)

        await bus.publish(_followed())

        logger.debug.assert_not_called()

    async def test_handlers_receive_exact_type_only(self):
        bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def handler(event):
            received.append(event)

        bus.subscribe(UserFollowed, handler)
        event = _followed()

        await bus.publish(event)
        await bus.publish(UserUnfollowed(follower_id=uuid7(), following_id=uuid7()))

        assert received == [event]

    async def test_failing_handler_does_not_block_others(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger=logger)
        received = []

        async def broken(event):
            raise RuntimeError("smtp down")

        async def working(event):
            received.append(event)

        bus.subscribe(UserFollowed, broken)
        bus.subscribe(UserFollowed, working)

        await bus.publish(_followed())

        assert len(received) == 1
        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["handler_name"] == "broken"
        assert kwargs["error_type"] == "RuntimeError"

    async def test_metadata_visible_during_dispatch_only(self):
        bus = InMemoryEventBus(logger=MagicMock())
        seen = {}

        async def handler(event):
            seen.update(bus.get_metadata(event.event_id))

        bus.subscribe(UserFollowed, handler)
        event = _followed()

        await bus.publish(event, metadata={"ip_address": "203.0.113.7"})

        assert seen == {"ip_address": "203.0.113.7"}
        assert bus.get_metadata(event.event_id) == {}
        assert bus.get_metadata("not-a-uuid") == {}


@pytest.mark.unit
class TestEmailEventHandler:
    def test_reset_link_encodes_token(self):
        settings = get_settings().model_copy(
            update={"password_reset_url_base": "https://questlog.local/reset"}
        )
        handler = EmailEventHandler(logger=MagicMock(), settings=settings)

        assert (
            handler.build_reset_link("a+b/c=")
            == "https://questlog.local/reset?token=a%2Bb%2Fc%3D"
        )

    async def test_reset_email_never_logs_token(self):
        logger = MagicMock()
        handler = EmailEventHandler(logger=logger, settings=get_settings())
        event = PasswordResetRequestSucceeded(
            user_id=uuid7(),
            email="ana@example.com",
            reset_token="secret-token-value",
            expires_at=datetime.now(UTC) + timedelta(minutes=15),
        )

        await handler.handle_password_reset_request_succeeded(event)

        logger.info.assert_called_once()
        assert "secret-token-value" not in repr(logger.info.call_args)
