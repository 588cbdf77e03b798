"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure. They are
attached to request fields through the Annotated types in
``src/domain/types.py``.
"""

import re
import unicodedata

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#].[^\s]*$", re.IGNORECASE)
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'


def validate_email(v: str) -> str:
    """Validate email format.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("Ana@Example.COM")
        'ana@example.com'
    """
    if not _EMAIL_PATTERN.match(v):
        raise ValueError(f"Invalid email format: {v}")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requires at least 8 characters with an uppercase letter, a lowercase
    letter, a digit and a special character.

    Raises:
        ValueError: If password doesn't meet requirements.
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in v):
        raise ValueError("Password must contain special character")
    return v


def validate_username(v: str) -> str:
    """Validate a public username.

    Letters, digits, underscores and hyphens only. Cannot start or end with
    an underscore or hyphen.

    Raises:
        ValueError: If username is malformed.

    Example:
        >>> validate_username("pixel_knight")
        'pixel_knight'
        >>> validate_username("_pixel")
        ValueError: Username cannot start or end with underscore or hyphen
    """
    if not _USERNAME_PATTERN.match(v):
        raise ValueError(
            "Username can only contain letters, numbers, underscores, and hyphens"
        )
    if v[0] in "_-" or v[-1] in "_-":
        raise ValueError("Username cannot start or end with underscore or hyphen")
    return v


def validate_rating(v: float) -> float:
    """Validate a review rating: 0-10 with at most one decimal place.

    Raises:
        ValueError: If out of range or too precise.
    """
    if not 0 <= v <= 10:
        raise ValueError("Rating must be between 0 and 10")
    if abs(v * 10 - round(v * 10)) > 1e-9:
        raise ValueError("Rating can have at most one decimal place")
    return round(v, 1)


def validate_website_url(v: str) -> str:
    """Validate an http(s) URL.

    Raises:
        ValueError: If the value is not an http or https URL.
    """
    if not _URL_PATTERN.match(v):
        raise ValueError("Website must be a valid http(s) URL")
    return v


def validate_refresh_token_format(v: str) -> str:
    """Validate refresh token format (urlsafe base64).

    Raises:
        ValueError: If token format is invalid.
    """
    if not v:
        raise ValueError("Refresh token cannot be empty")
    if not re.match(r"^[A-Za-z0-9_-]+$", v):
        raise ValueError("Invalid refresh token format")
    return v


def slugify(value: str) -> str:
    """Build a URL-safe slug from a title or name.

    Accents are stripped, runs of non-alphanumerics collapse into a single
    hyphen, and leading/trailing hyphens are removed.

    Example:
        >>> slugify("The Legend of Zelda: Breath of the Wild")
        'the-legend-of-zelda-breath-of-the-wild'
        >>> slugify("Pokémon Red & Blue")
        'pokemon-red-blue'
    """
    normalized = unicodedata.normalize("NFKD", value)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_only.lower())
    return slug.strip("-")
