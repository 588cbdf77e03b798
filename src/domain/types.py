"""Annotated types with centralized validation.

Define validation once, use everywhere. Request schemas declare fields with
these types and get constraints, docs and normalization for free.

Usage:
    from src.domain.types import Email, Password, Username

    class RegisterRequest(BaseModel):
        email: Email
        username: Username
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_rating,
    validate_refresh_token_format,
    validate_strong_password,
    validate_username,
    validate_website_url,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["player@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password: upper, lower, digit and special character, 8-128 chars."""

Username = Annotated[
    str,
    Field(
        min_length=3,
        max_length=30,
        description="Public username",
        examples=["pixel_knight"],
    ),
    AfterValidator(validate_username),
]
"""Username: 3-30 chars of ``[a-zA-Z0-9_-]``, no leading/trailing ``_``/``-``."""

RefreshToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=256,
        description="Opaque refresh token (urlsafe base64)",
        examples=["dGhpcyBpcyBhIHJhbmRvbSB0b2tlbg"],
    ),
    AfterValidator(validate_refresh_token_format),
]

ResetToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=2048,
        description="Password reset token received by email",
    ),
]

# ============================================================================
# Content Types
# ============================================================================

Rating = Annotated[
    float,
    Field(
        ge=0,
        le=10,
        description="Rating from 0 to 10 (one decimal place)",
        examples=[8.5],
    ),
    AfterValidator(validate_rating),
]

WebsiteUrl = Annotated[
    str,
    Field(
        max_length=255,
        description="http(s) URL",
        examples=["https://example.com"],
    ),
    AfterValidator(validate_website_url),
]
