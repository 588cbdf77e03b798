"""Base domain event class.

Domain events represent "things that happened" and are named in past tense
(UserFollowed, ReviewLiked). Handlers subscribe to concrete event classes on
the event bus.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class UserFollowed(DomainEvent):
    ...     follower_id: UUID
    ...     following_id: UUID
    >>> event = UserFollowed(follower_id=a, following_id=b)
    >>> event.event_id  # auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen, keyword-only dataclasses

    Attributes:
        event_id: Unique, time-ordered identifier for this event instance.
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
