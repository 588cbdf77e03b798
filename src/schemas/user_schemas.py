"""User, profile and social schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.application.dtos.profile_dtos import (
    FollowSuggestion,
    SocialStats,
    UserProfile,
)
from src.domain.entities.user import User
from src.domain.enums import ActivityType, UserRole
from src.domain.protocols import Activity
from src.domain.types import WebsiteUrl
from src.schemas.common_schemas import reject_null
from src.schemas.game_list_schemas import GameListResponse
from src.schemas.review_schemas import PROFILE_PREVIEW_LENGTH, ReviewPreviewResponse


# =============================================================================
# Requests
# =============================================================================


class ProfileUpdateRequest(BaseModel):
    """PATCH /api/v1/users/profile. Only the fields sent are changed."""

    display_name: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=500)
    avatar: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=100)
    website: WebsiteUrl | None = None
    is_private: bool | None = None
    language: str | None = Field(None, min_length=2, max_length=10)
    timezone: str | None = Field(None, min_length=1, max_length=50)
    email_notifications: bool | None = None

    @field_validator("is_private", "language", "timezone", "email_notifications")
    @classmethod
    def reject_null_values(cls, v):
        return reject_null(v)


class RoleUpdateRequest(BaseModel):
    role: UserRole


# =============================================================================
# Responses
# =============================================================================


class UserSummaryResponse(BaseModel):
    """Public identity of a member (no email)."""

    id: UUID
    username: str
    display_name: str | None = None
    avatar: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserSummaryResponse":
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            avatar=user.avatar,
            created_at=user.created_at,
        )


class ProfileStatsResponse(BaseModel):
    reviews_count: int
    followers_count: int
    following_count: int
    game_lists_count: int


class ProfileResponse(BaseModel):
    """Public profile page.

    For a private profile viewed by another member ``is_limited`` is true,
    bio/location/website are null and reviews and lists are empty.
    """

    id: UUID
    username: str
    display_name: str | None = None
    avatar: str | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    is_private: bool
    is_limited: bool
    is_following: bool
    created_at: datetime
    stats: ProfileStatsResponse
    recent_reviews: list[ReviewPreviewResponse] = Field(default_factory=list)
    recent_lists: list[GameListResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, profile: UserProfile) -> "ProfileResponse":
        user = profile.user
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            avatar=user.avatar,
            bio=user.bio,
            location=user.location,
            website=user.website,
            is_private=user.is_private,
            is_limited=profile.is_limited,
            is_following=profile.is_following,
            created_at=user.created_at,
            stats=ProfileStatsResponse(
                reviews_count=profile.stats.reviews_count,
                followers_count=profile.stats.followers_count,
                following_count=profile.stats.following_count,
                game_lists_count=profile.stats.game_lists_count,
            ),
            recent_reviews=[
                ReviewPreviewResponse.from_view(view, PROFILE_PREVIEW_LENGTH)
                for view in profile.recent_reviews
            ],
            recent_lists=[
                GameListResponse.from_entity(game_list, include_entries=False)
                for game_list in profile.recent_lists
            ],
        )


class FollowStatusResponse(BaseModel):
    is_following: bool


class SocialStatsResponse(BaseModel):
    followers_count: int
    following_count: int
    reviews_count: int
    likes_received: int

    @classmethod
    def from_dto(cls, stats: SocialStats) -> "SocialStatsResponse":
        return cls(
            followers_count=stats.followers_count,
            following_count=stats.following_count,
            reviews_count=stats.reviews_count,
            likes_received=stats.likes_received,
        )


class MutualFollowsResponse(BaseModel):
    user_ids: list[UUID]
    count: int


class FollowSuggestionResponse(BaseModel):
    user: UserSummaryResponse
    mutual_count: int

    @classmethod
    def from_dto(cls, suggestion: FollowSuggestion) -> "FollowSuggestionResponse":
        return cls(
            user=UserSummaryResponse.from_entity(suggestion.user),
            mutual_count=suggestion.mutual_count,
        )


class ActivityResponse(BaseModel):
    """Feed entry.

    Review activities fill the review/game fields, follow activities the
    target fields.
    """

    type: ActivityType
    actor_id: UUID
    actor_username: str
    created_at: datetime
    review_id: UUID | None = None
    review_title: str | None = None
    rating: float | None = None
    game_id: UUID | None = None
    game_title: str | None = None
    game_slug: str | None = None
    target_user_id: UUID | None = None
    target_username: str | None = None

    @classmethod
    def from_dto(cls, activity: Activity) -> "ActivityResponse":
        return cls(
            type=activity.type,
            actor_id=activity.actor_id,
            actor_username=activity.actor_username,
            created_at=activity.created_at,
            review_id=activity.review_id,
            review_title=activity.review_title,
            rating=activity.rating,
            game_id=activity.game_id,
            game_title=activity.game_title,
            game_slug=activity.game_slug,
            target_user_id=activity.target_user_id,
            target_username=activity.target_username,
        )
