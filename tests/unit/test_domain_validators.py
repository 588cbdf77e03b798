"""Unit tests for validation functions and the Annotated request types."""

import pytest
from pydantic import BaseModel, ValidationError

from src.domain.types import Email, Password, Rating, Username, WebsiteUrl
from src.domain.validators import (
    slugify,
    validate_email,
    validate_rating,
    validate_strong_password,
    validate_username,
)


class _Form(BaseModel):
    email: Email
    username: Username
    password: Password


class _ReviewForm(BaseModel):
    rating: Rating


class _ProfileForm(BaseModel):
    website: WebsiteUrl


@pytest.mark.unit
class TestValidators:
    def test_email_lowercased(self):
        assert validate_email("Ana@Example.COM") == "ana@example.com"

    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValueError):
            validate_email(email)

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Sh0rt!", "at least 8"),
            ("lowercase1!", "uppercase"),
            ("UPPERCASE1!", "lowercase"),
            ("NoDigits!!", "digit"),
            ("NoSpecial1", "special"),
        ],
    )
    def test_weak_passwords(self, password, message):
        with pytest.raises(ValueError, match=message):
            validate_strong_password(password)

    def test_strong_password(self):
        assert validate_strong_password("SecurePass123!") == "SecurePass123!"

    @pytest.mark.parametrize("username", ["_pixel", "pixel-", "pixel knight", "pixel!"])
    def test_invalid_username(self, username):
        with pytest.raises(ValueError):
            validate_username(username)

    def test_valid_username(self):
        assert validate_username("pixel_knight-2") == "pixel_knight-2"

    @pytest.mark.parametrize("rating", [0, 7.5, 10])
    def test_valid_rating(self, rating):
        assert validate_rating(rating) == rating

    @pytest.mark.parametrize("rating", [-0.1, 10.5, 7.25])
    def test_invalid_rating(self, rating):
        with pytest.raises(ValueError):
            validate_rating(rating)

    @pytest.mark.parametrize(
        ("title", "slug"),
        [
            ("Hades", "hades"),
            ("The Legend of Zelda: Breath of the Wild", "the-legend-of-zelda-breath-of-the-wild"),
            ("Pokémon Red & Blue", "pokemon-red-blue"),
            ("  --Doom (1993)--  ", "doom-1993"),
        ],
    )
    def test_slugify(self, title, slug):
        assert slugify(title) == slug


@pytest.mark.unit
class TestAnnotatedTypes:
    def test_valid_form(self):
        form = _Form(
            email="Pixel@Example.com",
            username="pixel_knight",
            password="SecurePass123!",
        )

        assert form.email == "pixel@example.com"

    def test_short_username_rejected(self):
        with pytest.raises(ValidationError):
            _Form(email="pixel@example.com", username="ab", password="SecurePass123!")

    def test_weak_password_rejected(self):
        with pytest.raises(ValidationError):
            _Form(email="pixel@example.com", username="pixel", password="password")

    def test_rating_bounds(self):
        assert _ReviewForm(rating=8.5).rating == 8.5
        with pytest.raises(ValidationError):
            _ReviewForm(rating=11)

    def test_website(self):
        assert _ProfileForm(website="https://example.com").website == "https://example.com"
        with pytest.raises(ValidationError):
            _ProfileForm(website="ftp://example.com")
