"""Review and like command handlers.

Every change that can affect a published review recomputes the game's
``average_rating`` and ``review_count``.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.review_commands import (
    CreateReview,
    DeleteReview,
    LikeReview,
    UnlikeReview,
    UpdateReview,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.follow import ReviewLike
from src.domain.entities.review import Review
from src.domain.errors import DuplicateRecordError
from src.domain.events.social_events import ReviewDeleted, ReviewLiked, ReviewPublished
from src.domain.protocols import (
    EventBusProtocol,
    GameRepository,
    LikeRepository,
    ReviewRepository,
    ReviewView,
)


class ReviewError:
    """Review command errors."""

    GAME_NOT_FOUND = "Game not found"
    REVIEW_NOT_FOUND = "Review not found"
    ALREADY_REVIEWED = "You have already reviewed this game"
    NOT_OWNER_UPDATE = "You can only update your own reviews"
    NOT_OWNER_DELETE = "You can only delete your own reviews"


class LikeError:
    """Like command errors."""

    REVIEW_NOT_FOUND = "Review not found"
    REVIEW_NOT_PUBLISHED = "Cannot like an unpublished review"
    ALREADY_LIKED = "You have already liked this review"
    NOT_LIKED = "You have not liked this review"


class CreateReviewHandler:
    """Handler for CreateReview command (one review per user and game)."""

    def __init__(
        self,
        review_repo: ReviewRepository,
        game_repo: GameRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._review_repo = review_repo
        self._game_repo = game_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateReview) -> Result[ReviewView, str]:
        if await self._game_repo.find_by_id(cmd.game_id) is None:
            return Failure(error=ReviewError.GAME_NOT_FOUND)

        if (
            await self._review_repo.find_by_user_and_game(cmd.user_id, cmd.game_id)
            is not None
        ):
            return Failure(error=ReviewError.ALREADY_REVIEWED)

        now = datetime.now(UTC)
        review = Review(
            id=uuid7(),
            user_id=cmd.user_id,
            game_id=cmd.game_id,
            title=cmd.title,
            content=cmd.content,
            rating=cmd.rating,
            is_published=cmd.is_published,
            is_spoiler=cmd.is_spoiler,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._review_repo.save(review)
        except DuplicateRecordError:
            return Failure(error=ReviewError.ALREADY_REVIEWED)
        await self._game_repo.refresh_rating_stats(review.game_id)

        await self._event_bus.publish(
            ReviewPublished(
                review_id=review.id,
                user_id=review.user_id,
                game_id=review.game_id,
                rating=review.rating,
                is_published=review.is_published,
            )
        )

        view = await self._review_repo.find_view(review.id)
        if view is None:
            return Failure(error=ReviewError.REVIEW_NOT_FOUND)
        return Success(value=view)


class UpdateReviewHandler:
    """Handler for UpdateReview command (author only)."""

    def __init__(
        self, review_repo: ReviewRepository, game_repo: GameRepository
    ) -> None:
        self._review_repo = review_repo
        self._game_repo = game_repo

    async def handle(self, cmd: UpdateReview) -> Result[ReviewView, str]:
        review = await self._review_repo.find_by_id(cmd.review_id)
        if review is None:
            return Failure(error=ReviewError.REVIEW_NOT_FOUND)
        if not review.is_owned_by(cmd.user_id):
            return Failure(error=ReviewError.NOT_OWNER_UPDATE)

        review.apply_changes(cmd.changes)
        await self._review_repo.update(review)
        await self._game_repo.refresh_rating_stats(review.game_id)

        view = await self._review_repo.find_view(review.id)
        if view is None:
            return Failure(error=ReviewError.REVIEW_NOT_FOUND)
        return Success(value=view)


class DeleteReviewHandler:
    """Handler for DeleteReview command (author or administrator)."""

    def __init__(
        self,
        review_repo: ReviewRepository,
        game_repo: GameRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._review_repo = review_repo
        self._game_repo = game_repo
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteReview) -> Result[None, str]:
        review = await self._review_repo.find_by_id(cmd.review_id)
        if review is None:
            return Failure(error=ReviewError.REVIEW_NOT_FOUND)
        if not (cmd.is_admin or review.is_owned_by(cmd.user_id)):
            return Failure(error=ReviewError.NOT_OWNER_DELETE)

        await self._review_repo.delete(review.id)
        await self._game_repo.refresh_rating_stats(review.game_id)

        await self._event_bus.publish(
            ReviewDeleted(
                review_id=review.id,
                game_id=review.game_id,
                deleted_by=cmd.user_id,
            )
        )
        return Success(value=None)


class LikeReviewHandler:
    """Handler for LikeReview command."""

    def __init__(
        self,
        review_repo: ReviewRepository,
        like_repo: LikeRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._review_repo = review_repo
        self._like_repo = like_repo
        self._event_bus = event_bus

    async def handle(self, cmd: LikeReview) -> Result[None, str]:
        review = await self._review_repo.find_by_id(cmd.review_id)
        if review is None:
            return Failure(error=LikeError.REVIEW_NOT_FOUND)
        if not review.is_published:
            return Failure(error=LikeError.REVIEW_NOT_PUBLISHED)
        if await self._like_repo.exists(cmd.user_id, review.id):
            return Failure(error=LikeError.ALREADY_LIKED)

        try:
            await self._like_repo.save(
                ReviewLike(
                    id=uuid7(),
                    user_id=cmd.user_id,
                    review_id=review.id,
                    created_at=datetime.now(UTC),
                )
            )
        except DuplicateRecordError:
            return Failure(error=LikeError.ALREADY_LIKED)

        await self._event_bus.publish(
            ReviewLiked(
                review_id=review.id,
                review_title=review.title,
                review_author_id=review.user_id,
                liker_id=cmd.user_id,
                liker_username=cmd.username,
            )
        )
        return Success(value=None)


class UnlikeReviewHandler:
    def __init__(
        self, review_repo: ReviewRepository, like_repo: LikeRepository
    ) -> None:
        self._review_repo = review_repo
        self._like_repo = like_repo

    async def handle(self, cmd: UnlikeReview) -> Result[None, str]:
        if await self._review_repo.find_by_id(cmd.review_id) is None:
            return Failure(error=LikeError.REVIEW_NOT_FOUND)
        if not await self._like_repo.delete(cmd.user_id, cmd.review_id):
            return Failure(error=LikeError.NOT_LIKED)
        return Success(value=None)
