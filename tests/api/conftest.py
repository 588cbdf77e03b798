"""Fixtures for API tests.

API tests run the real application with handler dependencies replaced by
stubs, so they exercise routing, auth, validation and RFC 7807 error
mapping without a database.
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_token_service
from src.main import app


@pytest.fixture
def client():
    """Test client that returns 500 responses instead of raising."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(autouse=True)
def clear_dependency_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build an Authorization header carrying a real access token."""

    def _build(
        user_id=None,
        username: str = "pixel_knight",
        roles: list[str] | None = None,
    ) -> dict[str, str]:
        token = get_token_service().generate_access_token(
            user_id=user_id or uuid7(),
            email=f"{username}@example.com",
            username=username,
            roles=roles or ["user"],
        )
        return {"Authorization": f"Bearer {token}"}

    return _build
