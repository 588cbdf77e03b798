"""Review, like and comment schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.application.dtos.review_dtos import ReviewItem
from src.domain.protocols import CommentView, ReviewView
from src.domain.types import Rating
from src.schemas.common_schemas import reject_null

PROFILE_PREVIEW_LENGTH = 200
GAME_PREVIEW_LENGTH = 300


# =============================================================================
# Requests
# =============================================================================


class ReviewCreateRequest(BaseModel):
    """POST /api/v1/reviews"""

    game_id: UUID
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=10, max_length=5000)
    rating: Rating
    is_published: bool = True
    is_spoiler: bool = False


class ReviewUpdateRequest(BaseModel):
    """PATCH /api/v1/reviews/{id}. Only the fields sent are changed."""

    title: str | None = Field(None, min_length=1, max_length=100)
    content: str | None = Field(None, min_length=10, max_length=5000)
    rating: Rating | None = None
    is_published: bool | None = None
    is_spoiler: bool | None = None

    @field_validator("title", "content", "rating", "is_published", "is_spoiler")
    @classmethod
    def reject_null_values(cls, v):
        return reject_null(v)


class CommentCreateRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


# =============================================================================
# Responses
# =============================================================================


class ReviewResponse(BaseModel):
    """Review with author, game and engagement counters."""

    id: UUID
    user_id: UUID
    author_username: str
    game_id: UUID
    game_title: str
    game_slug: str
    title: str
    content: str
    rating: float
    is_published: bool
    is_spoiler: bool
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: ReviewView, *, is_liked: bool = False) -> "ReviewResponse":
        review = view.review
        return cls(
            id=review.id,
            user_id=review.user_id,
            author_username=view.author_username,
            game_id=review.game_id,
            game_title=view.game_title,
            game_slug=view.game_slug,
            title=review.title,
            content=review.content,
            rating=review.rating,
            is_published=review.is_published,
            is_spoiler=review.is_spoiler,
            likes_count=view.likes_count,
            comments_count=view.comments_count,
            is_liked=is_liked,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    @classmethod
    def from_item(cls, item: ReviewItem) -> "ReviewResponse":
        return cls.from_view(item.view, is_liked=item.is_liked)


class ReviewPreviewResponse(BaseModel):
    """Short review card used on profile and game pages."""

    id: UUID
    author_username: str
    game_title: str
    game_slug: str
    title: str
    content_preview: str
    rating: float
    is_spoiler: bool
    likes_count: int = 0
    created_at: datetime

    @classmethod
    def from_view(cls, view: ReviewView, length: int) -> "ReviewPreviewResponse":
        return cls(
            id=view.review.id,
            author_username=view.author_username,
            game_title=view.game_title,
            game_slug=view.game_slug,
            title=view.review.title,
            content_preview=view.review.preview(length),
            rating=view.review.rating,
            is_spoiler=view.review.is_spoiler,
            likes_count=view.likes_count,
            created_at=view.review.created_at,
        )


class CommentResponse(BaseModel):
    id: UUID
    review_id: UUID
    user_id: UUID
    author_username: str
    author_display_name: str | None = None
    author_avatar: str | None = None
    content: str
    created_at: datetime

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentResponse":
        return cls(
            id=view.comment.id,
            review_id=view.comment.review_id,
            user_id=view.comment.user_id,
            author_username=view.author_username,
            author_display_name=view.author_display_name,
            author_avatar=view.author_avatar,
            content=view.comment.content,
            created_at=view.comment.created_at,
        )
