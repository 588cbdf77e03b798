"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.catalog import Developer, Genre, Platform, Publisher
from src.domain.entities.comment import Comment
from src.domain.entities.follow import Follow, ReviewLike
from src.domain.entities.game import Game
from src.domain.entities.game_list import GameList, GameListEntry
from src.domain.entities.notification import Notification
from src.domain.entities.review import Review
from src.domain.entities.user import User

__all__ = [
    "Comment",
    "Developer",
    "Follow",
    "Game",
    "GameList",
    "GameListEntry",
    "Genre",
    "Notification",
    "Platform",
    "Publisher",
    "Review",
    "ReviewLike",
    "User",
]
