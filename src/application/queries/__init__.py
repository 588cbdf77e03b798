"""Queries - Read operations that fetch data.

Queries are immutable dataclasses with question-like names. Their handlers
in ``handlers/`` never change state and never publish domain events.
"""

from src.application.queries.game_list_queries import GetGameList, ListGameLists
from src.application.queries.game_queries import (
    GetGame,
    ListCatalogEntries,
    ListGames,
    ListSimilarGames,
)
from src.application.queries.notification_queries import ListNotifications
from src.application.queries.review_queries import GetReview, ListComments, ListReviews
from src.application.queries.social_queries import (
    GetFeed,
    GetMutualFollows,
    GetSocialStats,
    IsFollowing,
    SuggestFollows,
)
from src.application.queries.user_queries import (
    GetCurrentUser,
    GetUserProfile,
    ListFollowers,
    ListFollowing,
    ListUsers,
)

__all__ = [
    "GetCurrentUser",
    "GetFeed",
    "GetGame",
    "GetGameList",
    "GetMutualFollows",
    "GetReview",
    "GetSocialStats",
    "GetUserProfile",
    "IsFollowing",
    "ListCatalogEntries",
    "ListComments",
    "ListFollowers",
    "ListFollowing",
    "ListGameLists",
    "ListGames",
    "ListNotifications",
    "ListReviews",
    "ListSimilarGames",
    "ListUsers",
    "SuggestFollows",
]
