"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.password_reset_token_service_protocol import (
    IssuedResetToken,
    PasswordResetTokenServiceProtocol,
)
from src.domain.protocols.refresh_token_service_protocol import (
    IssuedRefreshToken,
    RefreshTokenServiceProtocol,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.activity_repository import Activity, ActivityRepository
from src.domain.protocols.catalog_repository import (
    CatalogEntry,
    CatalogKind,
    CatalogRepository,
)
from src.domain.protocols.comment_repository import CommentRepository, CommentView
from src.domain.protocols.follow_repository import FollowRepository
from src.domain.protocols.game_list_repository import GameListRepository
from src.domain.protocols.game_repository import GameFilters, GameRepository
from src.domain.protocols.notification_repository import NotificationRepository
from src.domain.protocols.review_repository import (
    LikeRepository,
    ReviewFilters,
    ReviewRepository,
    ReviewView,
)
from src.domain.protocols.session_repository import SessionData, SessionRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "IssuedRefreshToken",
    "IssuedResetToken",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "PasswordResetTokenServiceProtocol",
    "RefreshTokenServiceProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "Activity",
    "ActivityRepository",
    "CatalogEntry",
    "CatalogKind",
    "CatalogRepository",
    "CommentRepository",
    "CommentView",
    "FollowRepository",
    "GameFilters",
    "GameListRepository",
    "GameRepository",
    "LikeRepository",
    "NotificationRepository",
    "ReviewFilters",
    "ReviewRepository",
    "ReviewView",
    "SessionData",
    "SessionRepository",
    "UserRepository",
]
