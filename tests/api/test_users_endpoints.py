"""API tests for member listing, profiles and admin user management."""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.user_handlers import UserCommandError
from src.application.dtos.pagination import Page
from src.application.dtos.profile_dtos import ProfileStats, UserProfile
from src.application.queries.handlers.user_handlers import UserQueryError
from src.core.container import (
    get_change_user_role_handler,
    get_delete_user_handler,
    get_get_user_profile_handler,
    get_list_followers_handler,
    get_list_following_handler,
    get_list_users_handler,
    get_update_profile_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.main import app

ANA = UUID("0192f0a3-2222-7b9a-8d2f-3a4b5c6d7e01")


def _user(username: str = "ana", **overrides) -> User:
    user = User(
        id=ANA if username == "ana" else uuid7(),
        email=f"{username}@example.com",
        username=username,
        password_hash="$2b$04$hash",
        bio="Roguelikes and rhythm games.",
    )
    for name, value in overrides.items():
        setattr(user, name, value)
    return user


# =============================================================================
# Test Doubles
# =============================================================================


class StubListUsersHandler:
    def __init__(self):
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        users = [_user("ana"), _user("ben")]
        return Success(value=Page(items=users, total=2, page=query.page, limit=query.limit))


class StubGetUserProfileHandler:
    async def handle(self, query):
        if query.username != "ana":
            return Failure(error=UserQueryError.USER_NOT_FOUND)
        limited = query.viewer_id != ANA
        user = _user("ana", is_private=True)
        if limited:
            user.bio = None
        return Success(
            value=UserProfile(
                user=user,
                stats=ProfileStats(
                    reviews_count=0 if limited else 3,
                    followers_count=5,
                    following_count=2,
                    game_lists_count=0 if limited else 1,
                ),
                is_limited=limited,
            )
        )


class StubListFollowersHandler:
    async def handle(self, query):
        if query.username != "ana":
            return Failure(error=UserQueryError.USER_NOT_FOUND)
        return Success(value=Page(items=[_user("ben")], total=1, page=1, limit=20))


class StubListFollowingHandler:
    async def handle(self, query):
        return Success(value=Page(items=[], total=0, page=query.page, limit=query.limit))


class StubUpdateProfileHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return Success(value=_user("ana", **cmd.changes))


class StubChangeUserRoleHandler:
    async def handle(self, cmd):
        if cmd.user_id != ANA:
            return Failure(error=UserCommandError.USER_NOT_FOUND)
        return Success(value=_user("ana", role=cmd.role))


class StubDeleteUserHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        if cmd.user_id != ANA:
            return Failure(error=UserCommandError.USER_NOT_FOUND)
        return Success(value=None)


@pytest.fixture(autouse=True)
def override_dependencies():
    app.dependency_overrides[get_get_user_profile_handler] = StubGetUserProfileHandler
    app.dependency_overrides[get_list_followers_handler] = StubListFollowersHandler
    app.dependency_overrides[get_list_following_handler] = StubListFollowingHandler
    app.dependency_overrides[get_change_user_role_handler] = StubChangeUserRoleHandler


@pytest.fixture
def list_handler():
    handler = StubListUsersHandler()
    app.dependency_overrides[get_list_users_handler] = lambda: handler
    return handler


@pytest.fixture
def update_handler():
    handler = StubUpdateProfileHandler()
    app.dependency_overrides[get_update_profile_handler] = lambda: handler
    return handler


@pytest.fixture
def delete_handler():
    handler = StubDeleteUserHandler()
    app.dependency_overrides[get_delete_user_handler] = lambda: handler
    return handler


# =============================================================================
# Listing and profiles
# =============================================================================


@pytest.mark.api
class TestListUsers:
    def test_list_hides_email(self, client, list_handler):
        response = client.get("/api/v1/users", params={"search": "an", "limit": 10})

        assert response.status_code == 200
        body = response.json()
        assert [item["username"] for item in body["items"]] == ["ana", "ben"]
        assert all("email" not in item for item in body["items"])
        (query,) = list_handler.queries
        assert query.search == "an"
        assert query.limit == 10

    def test_limit_is_bounded(self, client, list_handler):
        response = client.get("/api/v1/users", params={"limit": 101})

        assert response.status_code == 422
        assert list_handler.queries == []


@pytest.mark.api
class TestProfiles:
    def test_private_profile_is_limited_for_visitors(self, client):
        response = client.get("/api/v1/users/profile/ana")

        assert response.status_code == 200
        body = response.json()
        assert body["is_private"] is True
        assert body["is_limited"] is True
        assert body["bio"] is None
        assert body["stats"]["reviews_count"] == 0
        assert "email" not in body

    def test_owner_sees_full_profile(self, client, auth_headers):
        response = client.get(
            "/api/v1/users/profile/ana", headers=auth_headers(user_id=ANA, username="ana")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["is_limited"] is False
        assert body["bio"] == "Roguelikes and rhythm games."
        assert body["stats"]["reviews_count"] == 3

    def test_unknown_profile(self, client):
        response = client.get("/api/v1/users/profile/nobody")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_followers(self, client):
        response = client.get("/api/v1/users/profile/ana/followers")

        assert response.status_code == 200
        assert [item["username"] for item in response.json()["items"]] == ["ben"]

    def test_followers_of_unknown_user(self, client):
        response = client.get("/api/v1/users/profile/nobody/followers")

        assert response.status_code == 404

    def test_following(self, client):
        response = client.get("/api/v1/users/profile/ana/following")

        assert response.status_code == 200
        assert response.json()["meta"]["total"] == 0


# =============================================================================
# Profile updates
# =============================================================================


@pytest.mark.api
class TestUpdateProfile:
    def test_requires_auth(self, client, update_handler):
        response = client.patch("/api/v1/users/profile", json={"bio": "Hi"})

        assert response.status_code == 401
        assert update_handler.commands == []

    def test_only_sent_fields_change(self, client, auth_headers, update_handler):
        response = client.patch(
            "/api/v1/users/profile",
            json={"display_name": "Ana", "is_private": True},
            headers=auth_headers(user_id=ANA, username="ana"),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["display_name"] == "Ana"
        assert body["is_private"] is True
        assert body["email"] == "ana@example.com"
        (cmd,) = update_handler.commands
        assert cmd.user_id == ANA
        assert cmd.changes == {"display_name": "Ana", "is_private": True}

    def test_nullable_text_fields_can_be_cleared(
        self, client, auth_headers, update_handler
    ):
        response = client.patch(
            "/api/v1/users/profile",
            json={"bio": None},
            headers=auth_headers(user_id=ANA, username="ana"),
        )

        assert response.status_code == 200
        assert response.json()["bio"] is None
        (cmd,) = update_handler.commands
        assert cmd.changes == {"bio": None}

    @pytest.mark.parametrize(
        "field", ["is_private", "language", "timezone", "email_notifications"]
    )
    def test_null_rejected_for_required_settings(
        self, client, auth_headers, update_handler, field
    ):
        response = client.patch(
            "/api/v1/users/profile",
            json={field: None},
            headers=auth_headers(user_id=ANA, username="ana"),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == field
        assert update_handler.commands == []

    def test_invalid_website(self, client, auth_headers, update_handler):
        response = client.patch(
            "/api/v1/users/profile",
            json={"website": "not a url"},
            headers=auth_headers(user_id=ANA, username="ana"),
        )

        assert response.status_code == 422
        assert update_handler.commands == []


# =============================================================================
# Admin management
# =============================================================================


@pytest.mark.api
class TestAdminUserManagement:
    def test_change_role_requires_admin(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{ANA}/role", json={"role": "moderator"}, headers=auth_headers()
        )

        assert response.status_code == 403

    def test_change_role(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{ANA}/role",
            json={"role": "moderator"},
            headers=auth_headers(roles=["admin"]),
        )

        assert response.status_code == 200
        assert response.json()["role"] == UserRole.MODERATOR.value

    def test_change_role_rejects_unknown_role(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{ANA}/role",
            json={"role": "superuser"},
            headers=auth_headers(roles=["admin"]),
        )

        assert response.status_code == 422

    def test_change_role_of_unknown_user(self, client, auth_headers):
        response = client.patch(
            f"/api/v1/users/{uuid7()}/role",
            json={"role": "user"},
            headers=auth_headers(roles=["admin"]),
        )

        assert response.status_code == 404

    def test_delete_requires_admin(self, client, auth_headers, delete_handler):
        response = client.delete(f"/api/v1/users/{ANA}", headers=auth_headers())

        assert response.status_code == 403
        assert delete_handler.commands == []

    def test_delete_user(self, client, auth_headers, delete_handler):
        response = client.delete(
            f"/api/v1/users/{ANA}", headers=auth_headers(roles=["admin"])
        )

        assert response.status_code == 204
        (cmd,) = delete_handler.commands
        assert cmd.user_id == ANA

    def test_delete_unknown_user(self, client, auth_headers, delete_handler):
        response = client.delete(
            f"/api/v1/users/{uuid7()}", headers=auth_headers(roles=["admin"])
        )

        assert response.status_code == 404
