"""Lifecycle status of a game in the catalog."""

from enum import Enum


class GameStatus(str, Enum):
    """Development/release status of a game."""

    ANNOUNCED = "announced"
    IN_DEVELOPMENT = "in_development"
    ALPHA = "alpha"
    BETA = "beta"
    EARLY_ACCESS = "early_access"
    RELEASED = "released"
    CANCELLED = "cancelled"
