"""Reviews resource router.

Endpoints:
    GET    /api/v1/reviews                 - List reviews (filters, sorting)
    POST   /api/v1/reviews                 - Create review
    GET    /api/v1/reviews/{review_id}     - Get review
    PATCH  /api/v1/reviews/{review_id}     - Update own review
    DELETE /api/v1/reviews/{review_id}     - Delete own review (or admin)
    POST   /api/v1/reviews/{review_id}/likes  - Like review
    DELETE /api/v1/reviews/{review_id}/likes  - Remove like

Every write that touches a review refreshes the game's rating aggregate.
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.review_handlers import (
    CreateReviewHandler,
    DeleteReviewHandler,
    LikeError,
    LikeReviewHandler,
    ReviewError,
    UnlikeReviewHandler,
    UpdateReviewHandler,
)
from src.application.commands.review_commands import (
    CreateReview,
    DeleteReview,
    LikeReview,
    UnlikeReview,
    UpdateReview,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.review_handlers import (
    GetReviewHandler,
    ListReviewsHandler,
    ReviewQueryError,
)
from src.application.queries.review_queries import GetReview, ListReviews
from src.core.container import (
    get_create_review_handler,
    get_delete_review_handler,
    get_get_review_handler,
    get_like_review_handler,
    get_list_reviews_handler,
    get_unlike_review_handler,
    get_update_review_handler,
)
from src.core.result import Failure
from src.domain.enums import ReviewSortField, SortOrder
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    OptionalUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import (
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from src.schemas.review_schemas import (
    ReviewCreateRequest,
    ReviewResponse,
    ReviewUpdateRequest,
)

# ReviewError and LikeError share "Review not found", which is a 404 for both
_REVIEW_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    ReviewError.GAME_NOT_FOUND: ApplicationErrorCode.BAD_REQUEST,
    ReviewError.REVIEW_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ReviewError.ALREADY_REVIEWED: ApplicationErrorCode.CONFLICT,
    ReviewError.NOT_OWNER_UPDATE: ApplicationErrorCode.FORBIDDEN,
    ReviewError.NOT_OWNER_DELETE: ApplicationErrorCode.FORBIDDEN,
    LikeError.REVIEW_NOT_PUBLISHED: ApplicationErrorCode.BAD_REQUEST,
    LikeError.ALREADY_LIKED: ApplicationErrorCode.CONFLICT,
    LikeError.NOT_LIKED: ApplicationErrorCode.BAD_REQUEST,
    ReviewQueryError.REVIEW_NOT_PUBLISHED: ApplicationErrorCode.FORBIDDEN,
}

_REVIEW_ERROR_FIELDS: dict[str, str] = {
    ReviewError.GAME_NOT_FOUND: "game_id",
}


def _error(error: str, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_handler_error(
        error, request, _REVIEW_ERROR_CODES, _REVIEW_ERROR_FIELDS
    )


async def list_reviews(
    current_user: OptionalUser,
    game_id: UUID | None = Query(None),
    user_id: UUID | None = Query(None),
    min_rating: float | None = Query(None, ge=0, le=10),
    max_rating: float | None = Query(None, ge=0, le=10),
    sort_by: ReviewSortField = Query(ReviewSortField.CREATED_AT),
    sort_order: SortOrder = Query(SortOrder.DESC),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    handler: ListReviewsHandler = Depends(get_list_reviews_handler),
) -> PaginatedResponse[ReviewResponse]:
    """List reviews.

    GET /api/v1/reviews → 200 OK

    Only published reviews are listed, except that a member listing their
    own reviews (``user_id`` equal to the caller) also sees drafts.
    ``is_liked`` reflects the caller's likes (always false when anonymous).
    """
    result = await handler.handle(
        ListReviews(
            game_id=game_id,
            user_id=user_id,
            min_rating=min_rating,
            max_rating=max_rating,
            sort_by=sort_by,
            sort_order=sort_order,
            viewer_id=current_user.user_id if current_user else None,
            page=page,
            limit=limit,
        )
    )
    reviews = result.value  # type: ignore[union-attr]
    return PaginatedResponse[ReviewResponse](
        items=[ReviewResponse.from_item(item) for item in reviews.items],
        meta=PaginationMeta.from_page(reviews),
    )


async def create_review(
    request: Request,
    current_user: AuthenticatedUser,
    data: ReviewCreateRequest,
    handler: CreateReviewHandler = Depends(get_create_review_handler),
) -> ReviewResponse | JSONResponse:
    """Create a review.

    POST /api/v1/reviews → 201 Created

    Returns:
        ReviewResponse on success.
        JSONResponse 400 if the game does not exist.
        JSONResponse 409 if the caller already reviewed the game.
    """
    result = await handler.handle(
        CreateReview(user_id=current_user.user_id, **data.model_dump())
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return ReviewResponse.from_view(result.value)


async def get_review(
    request: Request,
    review_id: UUID,
    current_user: OptionalUser,
    handler: GetReviewHandler = Depends(get_get_review_handler),
) -> ReviewResponse | JSONResponse:
    """GET /api/v1/reviews/{review_id} → 200 OK

    An unpublished review is visible to its author only (403 otherwise).
    """
    result = await handler.handle(
        GetReview(
            review_id=review_id,
            viewer_id=current_user.user_id if current_user else None,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return ReviewResponse.from_item(result.value)


async def update_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: UUID,
    data: ReviewUpdateRequest,
    handler: UpdateReviewHandler = Depends(get_update_review_handler),
) -> ReviewResponse | JSONResponse:
    """PATCH /api/v1/reviews/{review_id} → 200 OK (author only)"""
    result = await handler.handle(
        UpdateReview(
            review_id=review_id,
            user_id=current_user.user_id,
            changes=data.model_dump(exclude_unset=True),
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return ReviewResponse.from_view(result.value)


async def delete_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: UUID,
    handler: DeleteReviewHandler = Depends(get_delete_review_handler),
) -> Response:
    """DELETE /api/v1/reviews/{review_id} → 204 No Content

    Allowed for the author and for admins.
    """
    result = await handler.handle(
        DeleteReview(
            review_id=review_id,
            user_id=current_user.user_id,
            is_admin=current_user.is_admin,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def like_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: UUID,
    handler: LikeReviewHandler = Depends(get_like_review_handler),
) -> MessageResponse | JSONResponse:
    """Like a published review.

    POST /api/v1/reviews/{review_id}/likes → 201 Created
    """
    result = await handler.handle(
        LikeReview(
            review_id=review_id,
            user_id=current_user.user_id,
            username=current_user.username,
        )
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return MessageResponse(message="Review liked")


async def unlike_review(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: UUID,
    handler: UnlikeReviewHandler = Depends(get_unlike_review_handler),
) -> Response:
    """DELETE /api/v1/reviews/{review_id}/likes → 204 No Content"""
    result = await handler.handle(
        UnlikeReview(review_id=review_id, user_id=current_user.user_id)
    )

    if isinstance(result, Failure):
        return _error(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
