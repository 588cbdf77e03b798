"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Note:
    DTOs are NOT the same as:
    - Domain protocol data types (port interface contracts in domain layer)
    - API schemas (Pydantic models in presentation layer)
"""

from src.application.dtos.auth_dtos import AuthTokens
from src.application.dtos.game_dtos import GameDetail
from src.application.dtos.notification_dtos import NotificationList
from src.application.dtos.pagination import Page, page_offset
from src.application.dtos.profile_dtos import (
    FollowSuggestion,
    ProfileStats,
    SocialStats,
    UserProfile,
)
from src.application.dtos.review_dtos import ReviewItem

__all__ = [
    "AuthTokens",
    "FollowSuggestion",
    "GameDetail",
    "NotificationList",
    "Page",
    "ProfileStats",
    "ReviewItem",
    "SocialStats",
    "UserProfile",
    "page_offset",
]
