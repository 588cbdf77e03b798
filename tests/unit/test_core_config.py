"""Unit tests for Settings validation.

Required values (database URL, secrets, API base URL) come from the test
environment set up in tests/conftest.py.
"""

import pytest
from pydantic import ValidationError

from src.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]


@pytest.mark.unit
class TestCookieSettings:
    def test_production_uses_samesite_none_with_secure_cookies(self):
        settings = _settings(environment="production", auth_cookie_secure=True)

        assert settings.auth_cookie_samesite == "none"
        assert settings.auth_cookie_secure is True

    def test_production_rejects_insecure_cookies(self):
        with pytest.raises(ValidationError, match="auth_cookie_secure"):
            _settings(environment="production", auth_cookie_secure=False)

    def test_insecure_cookies_allowed_outside_production(self):
        settings = _settings(environment="development", auth_cookie_secure=False)

        assert settings.auth_cookie_samesite == "lax"


@pytest.mark.unit
class TestFieldValidation:
    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            _settings(secret_key="too-short")

    def test_bcrypt_rounds_bounded(self):
        with pytest.raises(ValidationError, match="between 4 and 31"):
            _settings(bcrypt_rounds=3)

    def test_api_base_url_trailing_slash_stripped(self):
        settings = _settings(api_base_url="https://questlog.local/")

        assert settings.api_base_url == "https://questlog.local"

    def test_cors_origins_parsed(self):
        settings = _settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]
