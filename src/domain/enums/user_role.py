"""User roles for route-level authorization.

Role Hierarchy:
    admin > moderator > user

Usage:
    from src.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String enum so the value serializes directly into the JWT ``roles``
    claim and the ``users.role`` column.
    """

    USER = "user"
    """Standard member: reviews, lists, follows."""

    MODERATOR = "moderator"
    """Community moderator."""

    ADMIN = "admin"
    """Catalog management and user administration."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]
