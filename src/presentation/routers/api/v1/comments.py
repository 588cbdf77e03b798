"""Review comments router.

Endpoints:
    GET    /api/v1/reviews/{review_id}/comments  - List comments (oldest first)
    POST   /api/v1/reviews/{review_id}/comments  - Comment on a review
    DELETE /api/v1/comments/{comment_id}         - Delete comment
"""

from uuid import UUID

from fastapi import Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.comment_handlers import (
    AddCommentHandler,
    CommentError,
    DeleteCommentHandler,
)
from src.application.commands.review_commands import AddComment, DeleteComment
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.review_handlers import (
    ListCommentsHandler,
    ReviewQueryError,
)
from src.application.queries.review_queries import ListComments
from src.core.container import (
    get_add_comment_handler,
    get_delete_comment_handler,
    get_list_comments_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PaginatedResponse, PaginationMeta
from src.schemas.review_schemas import CommentCreateRequest, CommentResponse

_COMMENT_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    CommentError.REVIEW_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    CommentError.REVIEW_NOT_PUBLISHED: ApplicationErrorCode.BAD_REQUEST,
    CommentError.COMMENT_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    CommentError.NOT_OWNER: ApplicationErrorCode.FORBIDDEN,
    ReviewQueryError.REVIEW_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}


async def list_comments(
    request: Request,
    review_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    handler: ListCommentsHandler = Depends(get_list_comments_handler),
) -> PaginatedResponse[CommentResponse] | JSONResponse:
    """GET /api/v1/reviews/{review_id}/comments → 200 OK"""
    result = await handler.handle(
        ListComments(review_id=review_id, page=page, limit=limit)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _COMMENT_ERROR_CODES
        )

    comments = result.value
    return PaginatedResponse[CommentResponse](
        items=[CommentResponse.from_view(view) for view in comments.items],
        meta=PaginationMeta.from_page(comments),
    )


async def add_comment(
    request: Request,
    current_user: AuthenticatedUser,
    review_id: UUID,
    data: CommentCreateRequest,
    handler: AddCommentHandler = Depends(get_add_comment_handler),
) -> CommentResponse | JSONResponse:
    """Comment on a published review.

    POST /api/v1/reviews/{review_id}/comments → 201 Created

    The review author is notified unless they commented on their own review.
    """
    result = await handler.handle(
        AddComment(
            review_id=review_id,
            user_id=current_user.user_id,
            username=current_user.username,
            content=data.content,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _COMMENT_ERROR_CODES
        )

    return CommentResponse.from_view(result.value)


async def delete_comment(
    request: Request,
    current_user: AuthenticatedUser,
    comment_id: UUID,
    handler: DeleteCommentHandler = Depends(get_delete_comment_handler),
) -> Response:
    """DELETE /api/v1/comments/{comment_id} → 204 No Content

    Allowed for the comment author and for admins.
    """
    result = await handler.handle(
        DeleteComment(
            comment_id=comment_id,
            user_id=current_user.user_id,
            is_admin=current_user.is_admin,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _COMMENT_ERROR_CODES
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
