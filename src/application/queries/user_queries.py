"""User and profile queries (CQRS read operations).

Queries represent requests for data. They are immutable dataclasses with
question-like names. Queries NEVER change state and do NOT emit domain events.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Load the authenticated user's own record."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Paginated member directory.

    Attributes:
        search: Case-insensitive match on username or display name.
    """

    search: str | None = None
    page: int = 1
    limit: int = 20


@dataclass(frozen=True, kw_only=True)
class GetUserProfile:
    """Public profile page.

    Attributes:
        username: Profile to load.
        viewer_id: Caller (None for anonymous visitors); decides whether a
            private profile is shown in full.

    Example:
        >>> query = GetUserProfile(username="pixel_knight", viewer_id=None)
        >>> result = await handler.handle(query)
    """

    username: str
    viewer_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class ListFollowers:
    username: str
    page: int = 1
    limit: int = 20


@dataclass(frozen=True, kw_only=True)
class ListFollowing:
    username: str
    page: int = 1
    limit: int = 20
