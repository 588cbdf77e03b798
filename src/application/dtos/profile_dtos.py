"""User profile and social DTOs."""

from dataclasses import dataclass, field

from src.domain.entities.game_list import GameList
from src.domain.entities.user import User
from src.domain.protocols import ReviewView


@dataclass(frozen=True, kw_only=True)
class ProfileStats:
    """Counters shown on a profile page."""

    reviews_count: int
    followers_count: int
    following_count: int
    game_lists_count: int


@dataclass(frozen=True, kw_only=True)
class UserProfile:
    """Profile page payload.

    Attributes:
        is_limited: True when a private profile is viewed by someone else.
            Bio, location and website are hidden, and reviews, lists and
            their counts are withheld.
        is_following: Whether the viewer follows this user.
    """

    user: User
    stats: ProfileStats
    is_following: bool = False
    is_limited: bool = False
    recent_reviews: list[ReviewView] = field(default_factory=list)
    recent_lists: list[GameList] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class SocialStats:
    followers_count: int
    following_count: int
    reviews_count: int
    likes_received: int


@dataclass(frozen=True, kw_only=True)
class FollowSuggestion:
    """Suggested member with the number of mutual connections."""

    user: User
    mutual_count: int
