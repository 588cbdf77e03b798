"""Review DTOs."""

from dataclasses import dataclass

from src.domain.protocols import ReviewView


@dataclass(frozen=True, kw_only=True)
class ReviewItem:
    """Review view plus the caller's like state."""

    view: ReviewView
    is_liked: bool = False
