"""Comment command handlers."""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.review_commands import AddComment, DeleteComment
from src.core.result import Failure, Result, Success
from src.domain.entities.comment import Comment
from src.domain.events.social_events import CommentAdded
from src.domain.protocols import (
    CommentRepository,
    CommentView,
    EventBusProtocol,
    ReviewRepository,
)


class CommentError:
    """Comment command errors."""

    REVIEW_NOT_FOUND = "Review not found"
    REVIEW_NOT_PUBLISHED = "Cannot comment on an unpublished review"
    COMMENT_NOT_FOUND = "Comment not found"
    NOT_OWNER = "You can only delete your own comments"


class AddCommentHandler:
    """Handler for AddComment command. Notifies the review author."""

    def __init__(
        self,
        comment_repo: CommentRepository,
        review_repo: ReviewRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._comment_repo = comment_repo
        self._review_repo = review_repo
        self._event_bus = event_bus

    async def handle(self, cmd: AddComment) -> Result[CommentView, str]:
        review = await self._review_repo.find_by_id(cmd.review_id)
        if review is None:
            return Failure(error=CommentError.REVIEW_NOT_FOUND)
        if not review.is_published:
            return Failure(error=CommentError.REVIEW_NOT_PUBLISHED)

        now = datetime.now(UTC)
        comment = Comment(
            id=uuid7(),
            user_id=cmd.user_id,
            review_id=review.id,
            content=cmd.content,
            created_at=now,
            updated_at=now,
        )
        await self._comment_repo.save(comment)

        await self._event_bus.publish(
            CommentAdded(
                comment_id=comment.id,
                review_id=review.id,
                review_title=review.title,
                review_author_id=review.user_id,
                commenter_id=cmd.user_id,
                commenter_username=cmd.username,
            )
        )
        return Success(
            value=CommentView(comment=comment, author_username=cmd.username)
        )


class DeleteCommentHandler:
    """Handler for DeleteComment command (author or administrator)."""

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    async def handle(self, cmd: DeleteComment) -> Result[None, str]:
        comment = await self._comment_repo.find_by_id(cmd.comment_id)
        if comment is None:
            return Failure(error=CommentError.COMMENT_NOT_FOUND)
        if not (cmd.is_admin or comment.user_id == cmd.user_id):
            return Failure(error=CommentError.NOT_OWNER)

        await self._comment_repo.delete(comment.id)
        return Success(value=None)
