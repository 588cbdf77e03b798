"""Domain enums.

Usage:
    from src.domain.enums import UserRole, GameStatus
"""

from src.domain.enums.activity_type import ActivityType
from src.domain.enums.game_status import GameStatus
from src.domain.enums.notification_type import NotificationType
from src.domain.enums.sort_order import GameSortField, ReviewSortField, SortOrder
from src.domain.enums.user_role import UserRole

__all__ = [
    "ActivityType",
    "GameSortField",
    "GameStatus",
    "NotificationType",
    "ReviewSortField",
    "SortOrder",
    "UserRole",
]
