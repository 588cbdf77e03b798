"""Review, like and comment handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.events import get_event_bus
from src.core.container.repositories import (
    get_comment_repository,
    get_game_repository,
    get_like_repository,
    get_review_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.comment_handlers import (
        AddCommentHandler,
        DeleteCommentHandler,
    )
    from src.application.commands.handlers.review_handlers import (
        CreateReviewHandler,
        DeleteReviewHandler,
        LikeReviewHandler,
        UnlikeReviewHandler,
        UpdateReviewHandler,
    )
    from src.application.queries.handlers.review_handlers import (
        GetReviewHandler,
        ListCommentsHandler,
        ListReviewsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        CommentRepository,
        GameRepository,
        LikeRepository,
        ReviewRepository,
    )


# ============================================================================
# Review Command Handler Factories
# ============================================================================


async def get_create_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "CreateReviewHandler":
    """Get CreateReview command handler (request-scoped).

    Dependencies:
    - ReviewRepository (request-scoped)
    - GameRepository (request-scoped, rating stats refresh)
    - EventBus (app-scoped singleton, ReviewPublished)

    Returns:
        CreateReviewHandler instance.
    """
    from src.application.commands.handlers.review_handlers import (
        CreateReviewHandler,
    )

    return CreateReviewHandler(
        review_repo=review_repo, game_repo=game_repo, event_bus=get_event_bus()
    )


async def get_update_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "UpdateReviewHandler":
    from src.application.commands.handlers.review_handlers import (
        UpdateReviewHandler,
    )

    return UpdateReviewHandler(review_repo=review_repo, game_repo=game_repo)


async def get_delete_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "DeleteReviewHandler":
    from src.application.commands.handlers.review_handlers import (
        DeleteReviewHandler,
    )

    return DeleteReviewHandler(
        review_repo=review_repo, game_repo=game_repo, event_bus=get_event_bus()
    )


async def get_like_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    like_repo: "LikeRepository" = Depends(get_like_repository),
) -> "LikeReviewHandler":
    """Get LikeReview command handler (request-scoped)."""
    from src.application.commands.handlers.review_handlers import LikeReviewHandler

    return LikeReviewHandler(
        review_repo=review_repo, like_repo=like_repo, event_bus=get_event_bus()
    )


async def get_unlike_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    like_repo: "LikeRepository" = Depends(get_like_repository),
) -> "UnlikeReviewHandler":
    from src.application.commands.handlers.review_handlers import (
        UnlikeReviewHandler,
    )

    return UnlikeReviewHandler(review_repo=review_repo, like_repo=like_repo)


# ============================================================================
# Comment Command Handler Factories
# ============================================================================


async def get_add_comment_handler(
    comment_repo: "CommentRepository" = Depends(get_comment_repository),
    review_repo: "ReviewRepository" = Depends(get_review_repository),
) -> "AddCommentHandler":
    from src.application.commands.handlers.comment_handlers import AddCommentHandler

    return AddCommentHandler(
        comment_repo=comment_repo, review_repo=review_repo, event_bus=get_event_bus()
    )


async def get_delete_comment_handler(
    comment_repo: "CommentRepository" = Depends(get_comment_repository),
) -> "DeleteCommentHandler":
    from src.application.commands.handlers.comment_handlers import (
        DeleteCommentHandler,
    )

    return DeleteCommentHandler(comment_repo=comment_repo)


# ============================================================================
# Query Handler Factories
# ============================================================================


async def get_list_reviews_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    like_repo: "LikeRepository" = Depends(get_like_repository),
) -> "ListReviewsHandler":
    from src.application.queries.handlers.review_handlers import ListReviewsHandler

    return ListReviewsHandler(review_repo=review_repo, like_repo=like_repo)


async def get_get_review_handler(
    review_repo: "ReviewRepository" = Depends(get_review_repository),
    like_repo: "LikeRepository" = Depends(get_like_repository),
) -> "GetReviewHandler":
    from src.application.queries.handlers.review_handlers import GetReviewHandler

    return GetReviewHandler(review_repo=review_repo, like_repo=like_repo)


async def get_list_comments_handler(
    comment_repo: "CommentRepository" = Depends(get_comment_repository),
    review_repo: "ReviewRepository" = Depends(get_review_repository),
) -> "ListCommentsHandler":
    from src.application.queries.handlers.review_handlers import ListCommentsHandler

    return ListCommentsHandler(comment_repo=comment_repo, review_repo=review_repo)
