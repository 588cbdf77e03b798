"""Kinds of in-app notifications."""

from enum import Enum


class NotificationType(str, Enum):
    """Notification categories.

    FOLLOW, LIKE and COMMENT are produced from domain events.
    REVIEW_REPLY and SYSTEM are reserved for moderator/system messages.
    """

    FOLLOW = "follow"
    LIKE = "like"
    COMMENT = "comment"
    REVIEW_REPLY = "review_reply"
    SYSTEM = "system"
