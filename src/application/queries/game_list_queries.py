"""Game list queries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListGameLists:
    """Lists owned by ``user_id``; non-owners only see public ones."""

    user_id: UUID
    viewer_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class GetGameList:
    list_id: UUID
    viewer_id: UUID | None = None
