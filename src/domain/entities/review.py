"""Review domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


def truncate_preview(text: str, length: int) -> str:
    """Shorten ``text`` to ``length`` characters, appending ``...`` if cut."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


@dataclass
class Review:
    """A member's rated evaluation of a game.

    Business Rules:
        - One review per (user, game)
        - Rating is between 0 and 10 with one decimal place
        - Unpublished reviews are visible to their author only
        - Only published reviews count towards game aggregates
    """

    id: UUID
    user_id: UUID
    game_id: UUID
    title: str
    content: str
    rating: float
    is_published: bool = True
    is_spoiler: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_owned_by(self, user_id: UUID | None) -> bool:
        return user_id is not None and self.user_id == user_id

    def is_visible_to(self, viewer_id: UUID | None) -> bool:
        """Published reviews are public; drafts only to their author."""
        return self.is_published or self.is_owned_by(viewer_id)

    def preview(self, length: int) -> str:
        return truncate_preview(self.content, length)

    def apply_changes(self, changes: dict[str, object]) -> None:
        """Apply a partial update to title, content, rating or flags."""
        for name in ("title", "content", "rating", "is_published", "is_spoiler"):
            if name in changes:
                setattr(self, name, changes[name])
        self.updated_at = datetime.now(UTC)
