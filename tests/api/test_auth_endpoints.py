"""API tests for authentication endpoints.

Architecture:
- Uses real app with dependency overrides
- Stub handlers decide the outcome from the request data
- Verifies status codes, auth cookies and RFC 7807 error bodies
"""

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.authenticate_user_handler import LoginError
from src.application.commands.handlers.confirm_password_reset_handler import (
    PasswordResetConfirmError,
)
from src.application.commands.handlers.register_user_handler import RegistrationError
from src.application.dtos.auth_dtos import AuthTokens
from src.core.container import (
    get_authenticate_user_handler,
    get_confirm_password_reset_handler,
    get_get_current_user_handler,
    get_logout_user_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.main import app


def _user(email: str = "pixel@example.com", username: str = "pixel_knight") -> User:
    return User(
        id=uuid7(),
        email=email,
        username=username,
        password_hash="$2b$04$hash",
    )


def _tokens(user: User) -> AuthTokens:
    return AuthTokens(
        access_token="stub-access-token",
        refresh_token="stub-refresh-token",
        user=user,
    )


# =============================================================================
# Test Doubles
# =============================================================================


class StubRegisterUserHandler:
    async def handle(self, cmd):
        if cmd.email.startswith("taken"):
            return Failure(error=RegistrationError.EMAIL_ALREADY_EXISTS)
        return Success(value=_tokens(_user(cmd.email, cmd.username)))


class StubAuthenticateUserHandler:
    async def handle(self, cmd):
        if cmd.password != "SecurePass123!":
            return Failure(error=LoginError.INVALID_CREDENTIALS)
        return Success(value=_tokens(_user(cmd.email)))


class StubLogoutUserHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return Success(value=None)


class StubRequestPasswordResetHandler:
    async def handle(self, cmd):
        return Success(value=None)


class StubConfirmPasswordResetHandler:
    async def handle(self, cmd):
        if cmd.token == "good-reset-token-value":
            return Success(value=None)
        return Failure(error=PasswordResetConfirmError.INVALID_OR_EXPIRED)


class StubGetCurrentUserHandler:
    async def handle(self, query):
        user = _user()
        user.id = query.user_id
        return Success(value=user)


@pytest.fixture(autouse=True)
def override_dependencies():
    app.dependency_overrides[get_register_user_handler] = StubRegisterUserHandler
    app.dependency_overrides[get_authenticate_user_handler] = (
        StubAuthenticateUserHandler
    )
    app.dependency_overrides[get_request_password_reset_handler] = (
        StubRequestPasswordResetHandler
    )
    app.dependency_overrides[get_confirm_password_reset_handler] = (
        StubConfirmPasswordResetHandler
    )
    app.dependency_overrides[get_get_current_user_handler] = StubGetCurrentUserHandler


# =============================================================================
# Register / Login
# =============================================================================


@pytest.mark.api
class TestRegister:
    def test_register_sets_cookies(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "Pixel@Example.com",
                "username": "pixel_knight",
                "password": "SecurePass123!",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["access_token"] == "stub-access-token"
        assert body["token_type"] == "bearer"
        assert body["user"]["email"] == "pixel@example.com"
        assert response.cookies["authToken"] == "stub-access-token"
        assert response.cookies["refreshToken"] == "stub-refresh-token"
        set_cookie = response.headers.get_list("set-cookie")
        assert all("httponly" in cookie.lower() for cookie in set_cookie)

    def test_duplicate_email_is_conflict(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "taken@example.com",
                "username": "pixel_knight",
                "password": "SecurePass123!",
            },
        )

        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["detail"] == "Email already registered"
        assert body["type"].endswith("/errors/conflict")
        assert body["instance"] == "/api/v1/auth/register"

    def test_weak_password_lists_field_error(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "pixel@example.com",
                "username": "pixel_knight",
                "password": "password",
            },
        )

        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"password"}


@pytest.mark.api
class TestLogin:
    def test_login_success(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "pixel@example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 200
        assert response.json()["refresh_token"] == "stub-refresh-token"

    def test_wrong_password_is_unauthorized(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "pixel@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"


# =============================================================================
# Session
# =============================================================================


@pytest.mark.api
class TestSession:
    def test_me_requires_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["title"] == "Authentication Required"

    def test_me_rejects_garbage_token(self, client):
        response = client.get(
            "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_me_with_bearer_token(self, client, auth_headers):
        user_id = uuid7()

        response = client.get("/api/v1/auth/me", headers=auth_headers(user_id=user_id))

        assert response.status_code == 200
        assert response.json()["id"] == str(user_id)

    def test_me_with_cookie_token(self, client, auth_headers):
        token = auth_headers()["Authorization"].removeprefix("Bearer ")
        client.cookies.set("authToken", token)

        response = client.get("/api/v1/auth/me")

        assert response.status_code == 200

    def test_logout_clears_cookies(self, client):
        handler = StubLogoutUserHandler()
        app.dependency_overrides[get_logout_user_handler] = lambda: handler

        response = client.post(
            "/api/v1/auth/logout", json={"refresh_token": "some-refresh-token"}
        )

        assert response.status_code == 204
        assert handler.commands[0].refresh_token == "some-refresh-token"
        assert handler.commands[0].user_id is None
        set_cookie = " ".join(response.headers.get_list("set-cookie"))
        assert "authToken=" in set_cookie
        assert "refreshToken=" in set_cookie

    def test_refresh_without_token_is_unauthorized(self, client):
        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == 401


# =============================================================================
# Password reset
# =============================================================================


@pytest.mark.api
class TestPasswordReset:
    def test_forgot_password_always_accepted(self, client):
        response = client.post(
            "/api/v1/auth/forgot-password", json={"email": "nobody@example.com"}
        )

        assert response.status_code == 202
        assert "reset link" in response.json()["message"]

    def test_reset_with_bad_token(self, client):
        response = client.post(
            "/api/v1/auth/reset-password",
            json={"token": "stale-reset-token-value", "new_password": "NewSecure456!"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid or expired reset token"

    def test_reset_with_good_token(self, client):
        response = client.post(
            "/api/v1/auth/reset-password",
            json={"token": "good-reset-token-value", "new_password": "NewSecure456!"},
        )

        assert response.status_code == 200
