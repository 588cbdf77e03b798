"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and are never imported by the domain layer.

Importing this package registers every table on ``BaseModel.metadata``
(used by Alembic and ``Database.create_all``).
"""

from src.infrastructure.persistence.models.catalog import (
    Developer,
    Genre,
    Platform,
    Publisher,
)
from src.infrastructure.persistence.models.comment import Comment
from src.infrastructure.persistence.models.follow import Follow
from src.infrastructure.persistence.models.game import Game, game_genres, game_platforms
from src.infrastructure.persistence.models.game_list import GameList, GameListEntry
from src.infrastructure.persistence.models.notification import Notification
from src.infrastructure.persistence.models.review import Review, ReviewLike
from src.infrastructure.persistence.models.user import User
from src.infrastructure.persistence.models.user_session import UserSession

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
    "UserSession",
    "game_genres",
    "game_platforms",
]
