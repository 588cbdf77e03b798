"""Game domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID

from src.domain.enums import GameStatus
from src.domain.validators import slugify

# Fields an administrator may change through a partial update
EDITABLE_GAME_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "description",
        "summary",
        "release_date",
        "status",
        "cover_image",
        "developer_id",
        "publisher_id",
        "genre_ids",
        "platform_ids",
    }
)


@dataclass
class Game:
    """A game in the catalog.

    Business Rules:
        - ``slug`` is derived from ``title`` and is unique
        - ``average_rating`` and ``review_count`` are aggregates over
          published reviews and are never edited directly

    Attributes:
        id: Unique game identifier
        title: Display title
        slug: URL-safe unique identifier derived from title
        description: Long description
        summary: Short blurb (max 500 characters)
        release_date: Release date (None if unannounced)
        status: Development/release status
        cover_image: Cover image URL
        developer_id: Developer studio (optional)
        publisher_id: Publisher (optional)
        genre_ids: Associated genres
        platform_ids: Associated platforms
        average_rating: Mean rating of published reviews (0 when none)
        review_count: Number of published reviews
    """

    id: UUID
    title: str
    slug: str
    description: str | None = None
    summary: str | None = None
    release_date: date | None = None
    status: GameStatus = GameStatus.RELEASED
    cover_image: str | None = None
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    genre_ids: list[UUID] = field(default_factory=list)
    platform_ids: list[UUID] = field(default_factory=list)
    average_rating: float = 0.0
    review_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def apply_changes(self, changes: dict[str, object]) -> bool:
        """Apply a partial update.

        Regenerates the slug when the title changes.

        Args:
            changes: Mapping of field name to new value.

        Returns:
            True if the slug changed (caller must re-check uniqueness).
        """
        old_slug = self.slug
        for name, value in changes.items():
            if name in EDITABLE_GAME_FIELDS:
                setattr(self, name, value)
        if "title" in changes:
            self.slug = slugify(self.title)
        self.updated_at = datetime.now(UTC)
        return self.slug != old_slug
