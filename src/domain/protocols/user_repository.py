"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username (case-insensitive)."""
        ...

    async def find_by_ids(self, user_ids: list[UUID]) -> list[User]:
        """Fetch several users at once (order not guaranteed)."""
        ...

    async def list_users(
        self,
        *,
        search: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[User], int]:
        """List users newest first.

        Args:
            search: Case-insensitive match on username or display name.
            offset: Rows to skip.
            limit: Page size.

        Returns:
            Tuple of (page of users, total matching count).
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user."""
        ...

    async def update(self, user: User) -> None:
        """Persist changes to an existing user."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete user (cascades to owned content)."""
        ...
