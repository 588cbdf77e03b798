"""API tests for notification endpoints."""

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.notification_handlers import NotificationError
from src.application.dtos.notification_dtos import NotificationList
from src.application.dtos.pagination import Page
from src.core.container import (
    get_list_notifications_handler,
    get_mark_all_notifications_read_handler,
    get_mark_notification_read_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.notification import Notification
from src.domain.enums import NotificationType
from src.main import app


class StubListNotificationsHandler:
    def __init__(self):
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        notification = Notification(
            id=uuid7(),
            user_id=query.user_id,
            type=NotificationType.FOLLOW,
            title="New follower",
            message="ana started following you",
            data={"follower_id": str(uuid7())},
        )
        return Success(
            value=NotificationList(
                page=Page(items=[notification], total=1, page=query.page, limit=query.limit),
                unread_count=3,
            )
        )


class StubMarkNotificationReadHandler:
    async def handle(self, cmd):
        if str(cmd.notification_id).endswith("0"):
            return Failure(error=NotificationError.NOTIFICATION_NOT_FOUND)
        return Success(value=None)


class StubMarkAllNotificationsReadHandler:
    async def handle(self, cmd):
        return Success(value=3)


@pytest.fixture
def list_handler():
    handler = StubListNotificationsHandler()
    app.dependency_overrides[get_list_notifications_handler] = lambda: handler
    return handler


@pytest.fixture(autouse=True)
def override_dependencies():
    app.dependency_overrides[get_mark_notification_read_handler] = (
        StubMarkNotificationReadHandler
    )
    app.dependency_overrides[get_mark_all_notifications_read_handler] = (
        StubMarkAllNotificationsReadHandler
    )


@pytest.mark.api
class TestNotifications:
    def test_requires_authentication(self, client, list_handler):
        assert client.get("/api/v1/notifications").status_code == 401

    def test_list_for_caller(self, client, auth_headers, list_handler):
        user_id = uuid7()

        response = client.get(
            "/api/v1/notifications",
            params={"unread_only": "true"},
            headers=auth_headers(user_id=user_id),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["unread_count"] == 3
        assert body["items"][0]["type"] == "follow"
        assert body["meta"]["total"] == 1
        (query,) = list_handler.queries
        assert query.user_id == user_id
        assert query.unread_only is True

    def test_mark_read(self, client, auth_headers):
        notification_id = "0192f0a1-7c1e-7b9a-8d2f-3a4b5c6d7e8f"

        response = client.patch(
            f"/api/v1/notifications/{notification_id}/read",
            headers=auth_headers(),
        )

        assert response.status_code == 204

    def test_mark_read_of_foreign_notification(self, client, auth_headers):
        notification_id = "0192f0a1-7c1e-7b9a-8d2f-3a4b5c6d7e80"

        response = client.patch(
            f"/api/v1/notifications/{notification_id}/read",
            headers=auth_headers(),
        )

        assert response.status_code == 404

    def test_mark_all_read(self, client, auth_headers):
        response = client.post(
            "/api/v1/notifications/read-all", headers=auth_headers()
        )

        assert response.status_code == 200
        assert response.json() == {"updated": 3}
