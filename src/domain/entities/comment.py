"""Comment domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Comment:
    """A member's comment on a review."""

    id: UUID
    user_id: UUID
    review_id: UUID
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
