"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in
``src.domain.protocols``.
"""

from src.infrastructure.persistence.repositories.activity_repository import (
    ActivityRepository,
)
from src.infrastructure.persistence.repositories.catalog_repository import (
    CatalogRepository,
)
from src.infrastructure.persistence.repositories.comment_repository import (
    CommentRepository,
)
from src.infrastructure.persistence.repositories.follow_repository import (
    FollowRepository,
)
from src.infrastructure.persistence.repositories.game_list_repository import (
    GameListRepository,
)
from src.infrastructure.persistence.repositories.game_repository import (
    GameRepository,
)
from src.infrastructure.persistence.repositories.notification_repository import (
    NotificationRepository,
)
from src.infrastructure.persistence.repositories.review_repository import (
    LikeRepository,
    ReviewRepository,
)
from src.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ActivityRepository",
    "CatalogRepository",
    "CommentRepository",
    "FollowRepository",
    "GameListRepository",
    "GameRepository",
    "LikeRepository",
    "NotificationRepository",
    "ReviewRepository",
    "SessionRepository",
    "UserRepository",
]
