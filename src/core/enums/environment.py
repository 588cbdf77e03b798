"""Runtime environments recognised by Settings."""

from enum import Enum


class Environment(str, Enum):
    """Application environment types.

    DEVELOPMENT enables the console log renderer, the others log JSON.
    PRODUCTION also switches auth cookies to SameSite=None.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
