"""Activity feed item kinds."""

from enum import Enum


class ActivityType(str, Enum):
    """Type of an activity feed entry (also the feed ``type`` filter)."""

    REVIEW = "review"
    FOLLOW = "follow"
