"""FollowRepository protocol for the social graph."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.follow import Follow
from src.domain.entities.user import User


class FollowRepository(Protocol):
    """Follow repository protocol (port)."""

    async def exists(self, follower_id: UUID, following_id: UUID) -> bool:
        ...

    async def save(self, follow: Follow) -> None:
        ...

    async def delete(self, follower_id: UUID, following_id: UUID) -> bool:
        """Remove a follow.

        Returns:
            True if a follow was removed.
        """
        ...

    async def count_followers(self, user_id: UUID) -> int:
        ...

    async def count_following(self, user_id: UUID) -> int:
        ...

    async def list_followers(
        self, user_id: UUID, *, offset: int, limit: int
    ) -> tuple[list[User], int]:
        """Users following ``user_id``, most recent first."""
        ...

    async def list_following(
        self, user_id: UUID, *, offset: int, limit: int
    ) -> tuple[list[User], int]:
        """Users followed by ``user_id``, most recent first."""
        ...

    async def following_ids(self, user_id: UUID) -> list[UUID]:
        ...

    async def mutual_following_ids(self, user_id: UUID, other_id: UUID) -> list[UUID]:
        """Users followed by both ``user_id`` and ``other_id``."""
        ...

    async def suggest_for(self, user_id: UUID, limit: int) -> list[tuple[User, int]]:
        """Friends-of-friends not yet followed.

        Returns:
            List of (user, mutual connection count), highest count first.
        """
        ...
