"""Validators package exports."""

from src.domain.validators.functions import (
    slugify,
    validate_email,
    validate_rating,
    validate_refresh_token_format,
    validate_strong_password,
    validate_username,
    validate_website_url,
)

__all__ = [
    "slugify",
    "validate_email",
    "validate_rating",
    "validate_refresh_token_format",
    "validate_strong_password",
    "validate_username",
    "validate_website_url",
]
