"""Notifications router.

Endpoints:
    GET   /api/v1/notifications                       - Caller's notifications
    PATCH /api/v1/notifications/{notification_id}/read - Mark one read
    POST  /api/v1/notifications/read-all              - Mark all read

Notifications are only ever visible to their recipient; anyone else gets 404.
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.notification_handlers import (
    MarkAllNotificationsReadHandler,
    MarkNotificationReadHandler,
    NotificationError,
)
from src.application.commands.notification_commands import (
    MarkAllNotificationsRead,
    MarkNotificationRead,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.notification_handlers import (
    ListNotificationsHandler,
)
from src.application.queries.notification_queries import ListNotifications
from src.core.container import (
    get_list_notifications_handler,
    get_mark_all_notifications_read_handler,
    get_mark_notification_read_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PaginationMeta
from src.schemas.notification_schemas import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
)

_NOTIFICATION_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    NotificationError.NOTIFICATION_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}


async def list_notifications(
    current_user: AuthenticatedUser,
    unread_only: bool = Query(False),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    handler: ListNotificationsHandler = Depends(get_list_notifications_handler),
) -> NotificationListResponse:
    """List the caller's notifications, newest first.

    GET /api/v1/notifications → 200 OK

    ``unread_count`` is the total of unread notifications, independent of
    the page and the ``unread_only`` filter.
    """
    result = await handler.handle(
        ListNotifications(
            user_id=current_user.user_id,
            unread_only=unread_only,
            page=page,
            limit=limit,
        )
    )
    notifications = result.value  # type: ignore[union-attr]
    return NotificationListResponse(
        items=[
            NotificationResponse.from_entity(notification)
            for notification in notifications.page.items
        ],
        meta=PaginationMeta.from_page(notifications.page),
        unread_count=notifications.unread_count,
    )


async def mark_notification_read(
    request: Request,
    current_user: AuthenticatedUser,
    notification_id: UUID,
    handler: MarkNotificationReadHandler = Depends(get_mark_notification_read_handler),
) -> Response:
    """PATCH /api/v1/notifications/{notification_id}/read → 204 No Content"""
    result = await handler.handle(
        MarkNotificationRead(
            notification_id=notification_id,
            user_id=current_user.user_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _NOTIFICATION_ERROR_CODES
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def mark_all_notifications_read(
    current_user: AuthenticatedUser,
    handler: MarkAllNotificationsReadHandler = Depends(
        get_mark_all_notifications_read_handler
    ),
) -> MarkAllReadResponse:
    """POST /api/v1/notifications/read-all → 200 OK"""
    result = await handler.handle(
        MarkAllNotificationsRead(user_id=current_user.user_id)
    )
    return MarkAllReadResponse(updated=result.value)  # type: ignore[union-attr]
