"""Pytest configuration shared by all test suites.

Settings are read from the environment when ``src.core.config`` is first
imported, so test defaults are applied here before any application module
loads. Values already present in the environment (e.g. CI) win.

Fixtures:
    database: Fresh in-memory SQLite database with all tables created
    session: Transactional session on that database
"""

import os

_TEST_ENV = {
    "ENVIRONMENT": "testing",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "SECRET_KEY": "test-secret-key-for-access-tokens-0123456789",
    "RESET_SECRET_KEY": "test-secret-key-for-reset-tokens-0123456789",
    "API_BASE_URL": "http://testserver",
    "CORS_ORIGINS": "http://localhost:4321",
    "BCRYPT_ROUNDS": "4",
    "RESET_TOKEN_BCRYPT_ROUNDS": "4",
    "AUTH_COOKIE_SECURE": "false",
}
for _key, _value in _TEST_ENV.items():
    os.environ.setdefault(_key, _value)

import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402


@pytest_asyncio.fixture
async def database():
    """Provide an isolated in-memory database per test."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    """Provide a session that commits when the test body succeeds."""
    async with database.get_session() as db_session:
        yield db_session
