"""Centralized constants for internal implementation details.

These are fixed product rules, NOT environment-specific configuration.
For environment-specific settings use ``src/core/config.py``.

Example:
    >>> from src.core.constants import REFRESH_TOKEN_BYTES
    >>> token = secrets.token_urlsafe(REFRESH_TOKEN_BYTES)
"""

# =============================================================================
# Tokens
# =============================================================================

REFRESH_TOKEN_BYTES: int = 32
"""Entropy of opaque refresh tokens (32 bytes = 256 bits)."""

RESET_TOKEN_TYPE: str = "reset"
"""Value of the ``type`` claim on password reset JWTs."""
