"""CommentRepository protocol."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from src.domain.entities.comment import Comment


@dataclass
class CommentView:
    """Comment joined with its author's public identity."""

    comment: Comment
    author_username: str
    author_display_name: str | None = None
    author_avatar: str | None = None


class CommentRepository(Protocol):
    """Comment repository protocol (port)."""

    async def find_by_id(self, comment_id: UUID) -> Comment | None:
        ...

    async def list_for_review(
        self,
        review_id: UUID,
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[CommentView], int]:
        """Comments on a review, oldest first."""
        ...

    async def save(self, comment: Comment) -> None:
        ...

    async def delete(self, comment_id: UUID) -> None:
        ...
