"""Notification event handler.

Turns community events into in-app notifications for the affected user.

Events:
    - UserFollowed → FOLLOW notification for the followed user
    - ReviewLiked → LIKE notification for the review author
    - CommentAdded → COMMENT notification for the review author

Self-actions (liking or commenting on your own review) never notify.

Each event is written in its own database session, separate from the
request session that published it, so a failure here cannot roll back the
action that triggered it.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.domain.entities.notification import Notification
from src.domain.enums import NotificationType
from src.domain.events.social_events import CommentAdded, ReviewLiked, UserFollowed
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories.notification_repository import (
    NotificationRepository,
)


class NotificationEventHandler:
    """Persists notifications for social events.

    Attributes:
        _database: Database used to open a dedicated session per event.
        _logger: Logger protocol implementation.
    """

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        self._database = database
        self._logger = logger

    async def handle_user_followed(self, event: UserFollowed) -> None:
        await self._notify(
            Notification(
                id=uuid7(),
                user_id=event.following_id,
                type=NotificationType.FOLLOW,
                title="New follower",
                message=f"{event.follower_username} started following you",
                data={"follower_id": str(event.follower_id)},
                created_at=datetime.now(UTC),
            )
        )

    async def handle_review_liked(self, event: ReviewLiked) -> None:
        if event.liker_id == event.review_author_id:
            return

        await self._notify(
            Notification(
                id=uuid7(),
                user_id=event.review_author_id,
                type=NotificationType.LIKE,
                title="New like on your review",
                message=f'{event.liker_username} liked your review "{event.review_title}"',
                data={
                    "review_id": str(event.review_id),
                    "liker_id": str(event.liker_id),
                },
                created_at=datetime.now(UTC),
            )
        )

    async def handle_comment_added(self, event: CommentAdded) -> None:
        if event.commenter_id == event.review_author_id:
            return

        await self._notify(
            Notification(
                id=uuid7(),
                user_id=event.review_author_id,
                type=NotificationType.COMMENT,
                title="New comment on your review",
                message=(
                    f'{event.commenter_username} commented on your review '
                    f'"{event.review_title}"'
                ),
                data={
                    "review_id": str(event.review_id),
                    "comment_id": str(event.comment_id),
                },
                created_at=datetime.now(UTC),
            )
        )

    async def _notify(self, notification: Notification) -> None:
        async with self._database.get_session() as session:
            await NotificationRepository(session).save(notification)

        self._logger.debug(
            "notification_created",
            notification_id=str(notification.id),
            user_id=str(notification.user_id),
            type=notification.type.value,
        )
