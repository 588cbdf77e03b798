"""Review and comment query handlers."""

from uuid import UUID

from src.application.dtos.pagination import Page, page_offset
from src.application.dtos.review_dtos import ReviewItem
from src.application.queries.review_queries import GetReview, ListComments, ListReviews
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    CommentRepository,
    CommentView,
    LikeRepository,
    ReviewFilters,
    ReviewRepository,
)


class ReviewQueryError:
    REVIEW_NOT_FOUND = "Review not found"
    REVIEW_NOT_PUBLISHED = "This review is not published"


class ListReviewsHandler:
    """List reviews with engagement counts and the caller's like state.

    Drafts are only included when the caller lists their own reviews.
    """

    def __init__(
        self, review_repo: ReviewRepository, like_repo: LikeRepository
    ) -> None:
        self._review_repo = review_repo
        self._like_repo = like_repo

    async def handle(self, query: ListReviews) -> Result[Page[ReviewItem], str]:
        own_listing = query.viewer_id is not None and query.user_id == query.viewer_id
        filters = ReviewFilters(
            game_id=query.game_id,
            user_id=query.user_id,
            min_rating=query.min_rating,
            max_rating=query.max_rating,
            include_unpublished_for=query.viewer_id if own_listing else None,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        )
        views, total = await self._review_repo.list_reviews(
            filters,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )

        liked: set[UUID] = set()
        if query.viewer_id is not None and views:
            liked = await self._like_repo.liked_review_ids(
                query.viewer_id, [view.review.id for view in views]
            )

        items = [
            ReviewItem(view=view, is_liked=view.review.id in liked) for view in views
        ]
        return Success(
            value=Page(items=items, total=total, page=query.page, limit=query.limit)
        )


class GetReviewHandler:
    def __init__(
        self, review_repo: ReviewRepository, like_repo: LikeRepository
    ) -> None:
        self._review_repo = review_repo
        self._like_repo = like_repo

    async def handle(self, query: GetReview) -> Result[ReviewItem, str]:
        view = await self._review_repo.find_view(query.review_id)
        if view is None:
            return Failure(error=ReviewQueryError.REVIEW_NOT_FOUND)
        if not view.review.is_visible_to(query.viewer_id):
            return Failure(error=ReviewQueryError.REVIEW_NOT_PUBLISHED)

        is_liked = query.viewer_id is not None and await self._like_repo.exists(
            query.viewer_id, view.review.id
        )
        return Success(value=ReviewItem(view=view, is_liked=is_liked))


class ListCommentsHandler:
    """Comments on a review, oldest first."""

    def __init__(
        self, comment_repo: CommentRepository, review_repo: ReviewRepository
    ) -> None:
        self._comment_repo = comment_repo
        self._review_repo = review_repo

    async def handle(self, query: ListComments) -> Result[Page[CommentView], str]:
        if await self._review_repo.find_by_id(query.review_id) is None:
            return Failure(error=ReviewQueryError.REVIEW_NOT_FOUND)

        comments, total = await self._comment_repo.list_for_review(
            query.review_id,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )
        return Success(
            value=Page(items=comments, total=total, page=query.page, limit=query.limit)
        )
