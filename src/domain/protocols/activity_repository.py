"""ActivityRepository protocol for the activity feed."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.enums import ActivityType


@dataclass
class Activity:
    """One activity feed entry.

    Review activities fill the ``review_*``/``game_*`` fields; follow
    activities fill the ``target_*`` fields.
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


class ActivityRepository(Protocol):
    """Activity feed repository protocol (port)."""

    async def list_activity(
        self,
        actor_ids: list[UUID],
        types: list[ActivityType],
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[Activity], int]:
        """Published reviews and follows by ``actor_ids``, newest first.

        Returns:
            Tuple of (page of activities, total count across types).
        """
        ...
