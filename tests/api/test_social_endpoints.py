"""API tests for follows, social counters, suggestions and the feed."""

from datetime import UTC, datetime
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.follow_handlers import FollowError
from src.application.dtos.pagination import Page
from src.application.dtos.profile_dtos import FollowSuggestion, SocialStats
from src.application.queries.handlers.social_handlers import SocialQueryError
from src.core.container import (
    get_feed_handler,
    get_follow_user_handler,
    get_is_following_handler,
    get_mutual_follows_handler,
    get_social_stats_handler,
    get_suggest_follows_handler,
    get_unfollow_user_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.enums import ActivityType
from src.domain.protocols import Activity
from src.main import app

ME = UUID("0192f0a2-1111-7b9a-8d2f-3a4b5c6d7e01")
FRIEND = UUID("0192f0a2-1111-7b9a-8d2f-3a4b5c6d7e02")
ALREADY_FOLLOWED = UUID("0192f0a2-1111-7b9a-8d2f-3a4b5c6d7e03")


# =============================================================================
# Test Doubles
# =============================================================================


class StubFollowUserHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        if cmd.following_id == cmd.follower_id:
            return Failure(error=FollowError.CANNOT_FOLLOW_SELF)
        if cmd.following_id == ALREADY_FOLLOWED:
            return Failure(error=FollowError.ALREADY_FOLLOWING)
        if cmd.following_id != FRIEND:
            return Failure(error=FollowError.USER_NOT_FOUND)
        return Success(value=None)


class StubUnfollowUserHandler:
    async def handle(self, cmd):
        if cmd.following_id != ALREADY_FOLLOWED:
            return Failure(error=FollowError.NOT_FOLLOWING)
        return Success(value=None)


class StubIsFollowingHandler:
    async def handle(self, query):
        return Success(value=query.following_id == ALREADY_FOLLOWED)


class StubSocialStatsHandler:
    async def handle(self, query):
        if query.user_id != FRIEND:
            return Failure(error=SocialQueryError.USER_NOT_FOUND)
        return Success(
            value=SocialStats(
                followers_count=12,
                following_count=3,
                reviews_count=7,
                likes_received=40,
            )
        )


class StubMutualFollowsHandler:
    async def handle(self, query):
        if query.other_id != FRIEND:
            return Failure(error=SocialQueryError.USER_NOT_FOUND)
        return Success(value=[ALREADY_FOLLOWED])


class StubSuggestFollowsHandler:
    def __init__(self):
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        suggestion = FollowSuggestion(
            user=User(
                id=FRIEND,
                email="ben@example.com",
                username="ben",
                password_hash="$2b$04$hash",
            ),
            mutual_count=2,
        )
        return Success(value=[suggestion])


class StubFeedHandler:
    def __init__(self):
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        items = [
            Activity(
                type=ActivityType.REVIEW,
                actor_id=FRIEND,
                actor_username="ben",
                created_at=datetime(2026, 3, 2, tzinfo=UTC),
                review_id=uuid7(),
                review_title="Still the best roguelike",
                rating=9.5,
                game_id=uuid7(),
                game_title="Hades",
                game_slug="hades",
            ),
            Activity(
                type=ActivityType.FOLLOW,
                actor_id=FRIEND,
                actor_username="ben",
                created_at=datetime(2026, 3, 1, tzinfo=UTC),
                target_user_id=ME,
                target_username="pixel_knight",
            ),
        ]
        return Success(value=Page(items=items, total=2, page=query.page, limit=query.limit))


@pytest.fixture(autouse=True)
def override_dependencies():
    app.dependency_overrides[get_unfollow_user_handler] = StubUnfollowUserHandler
    app.dependency_overrides[get_is_following_handler] = StubIsFollowingHandler
    app.dependency_overrides[get_social_stats_handler] = StubSocialStatsHandler
    app.dependency_overrides[get_mutual_follows_handler] = StubMutualFollowsHandler


@pytest.fixture
def follow_handler():
    handler = StubFollowUserHandler()
    app.dependency_overrides[get_follow_user_handler] = lambda: handler
    return handler


@pytest.fixture
def suggest_handler():
    handler = StubSuggestFollowsHandler()
    app.dependency_overrides[get_suggest_follows_handler] = lambda: handler
    return handler


@pytest.fixture
def feed_handler():
    handler = StubFeedHandler()
    app.dependency_overrides[get_feed_handler] = lambda: handler
    return handler


# =============================================================================
# Follow / unfollow
# =============================================================================


@pytest.mark.api
class TestFollow:
    def test_follow_requires_auth(self, client, follow_handler):
        response = client.post(f"/api/v1/users/{FRIEND}/follow")

        assert response.status_code == 401
        assert follow_handler.commands == []

    def test_follow_success(self, client, auth_headers, follow_handler):
        response = client.post(
            f"/api/v1/users/{FRIEND}/follow",
            headers=auth_headers(user_id=ME, username="pixel_knight"),
        )

        assert response.status_code == 201
        assert response.json() == {"message": "User followed"}
        (cmd,) = follow_handler.commands
        assert cmd.follower_id == ME
        assert cmd.follower_username == "pixel_knight"
        assert cmd.following_id == FRIEND

    def test_follow_self_is_bad_request(self, client, auth_headers, follow_handler):
        response = client.post(
            f"/api/v1/users/{ME}/follow", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "You cannot follow yourself"

    def test_follow_twice_is_conflict(self, client, auth_headers, follow_handler):
        response = client.post(
            f"/api/v1/users/{ALREADY_FOLLOWED}/follow", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/errors/conflict")

    def test_follow_unknown_user(self, client, auth_headers, follow_handler):
        response = client.post(
            f"/api/v1/users/{uuid7()}/follow", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 404

    def test_unfollow(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/users/{ALREADY_FOLLOWED}/follow", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 204

    def test_unfollow_without_follow_is_bad_request(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/users/{FRIEND}/follow", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "You are not following this user"

    def test_follow_status(self, client, auth_headers):
        headers = auth_headers(user_id=ME)

        following = client.get(f"/api/v1/users/{ALREADY_FOLLOWED}/follow", headers=headers)
        not_following = client.get(f"/api/v1/users/{FRIEND}/follow", headers=headers)

        assert following.json() == {"is_following": True}
        assert not_following.json() == {"is_following": False}


# =============================================================================
# Graph queries
# =============================================================================


@pytest.mark.api
class TestSocialQueries:
    def test_stats_are_public(self, client):
        response = client.get(f"/api/v1/users/{FRIEND}/stats")

        assert response.status_code == 200
        assert response.json() == {
            "followers_count": 12,
            "following_count": 3,
            "reviews_count": 7,
            "likes_received": 40,
        }

    def test_stats_unknown_user(self, client):
        response = client.get(f"/api/v1/users/{uuid7()}/stats")

        assert response.status_code == 404

    def test_mutual_follows(self, client, auth_headers):
        response = client.get(
            f"/api/v1/users/{FRIEND}/mutual", headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 200
        assert response.json() == {"user_ids": [str(ALREADY_FOLLOWED)], "count": 1}

    def test_mutual_follows_requires_auth(self, client):
        response = client.get(f"/api/v1/users/{FRIEND}/mutual")

        assert response.status_code == 401

    def test_suggestions(self, client, auth_headers, suggest_handler):
        response = client.get(
            "/api/v1/users/suggestions",
            params={"limit": 5},
            headers=auth_headers(user_id=ME),
        )

        assert response.status_code == 200
        (suggestion,) = response.json()
        assert suggestion["user"]["username"] == "ben"
        assert "email" not in suggestion["user"]
        assert suggestion["mutual_count"] == 2
        (query,) = suggest_handler.queries
        assert query.user_id == ME
        assert query.limit == 5

    def test_suggestions_limit_is_bounded(self, client, auth_headers, suggest_handler):
        response = client.get(
            "/api/v1/users/suggestions",
            params={"limit": 51},
            headers=auth_headers(user_id=ME),
        )

        assert response.status_code == 422
        assert suggest_handler.queries == []


# =============================================================================
# Feed
# =============================================================================


@pytest.mark.api
class TestFeed:
    def test_feed_requires_auth(self, client, feed_handler):
        response = client.get("/api/v1/feed")

        assert response.status_code == 401
        assert feed_handler.queries == []

    def test_feed_items_by_kind(self, client, auth_headers, feed_handler):
        response = client.get("/api/v1/feed", headers=auth_headers(user_id=ME))

        assert response.status_code == 200
        body = response.json()
        review, follow = body["items"]
        assert review["type"] == "review"
        assert review["game_slug"] == "hades"
        assert review["target_user_id"] is None
        assert follow["type"] == "follow"
        assert follow["target_username"] == "pixel_knight"
        assert follow["review_id"] is None
        assert body["meta"]["total"] == 2
        (query,) = feed_handler.queries
        assert query.user_id == ME
        assert query.type is None
        assert (query.page, query.limit) == (1, 20)

    def test_feed_type_filter(self, client, auth_headers, feed_handler):
        response = client.get(
            "/api/v1/feed",
            params={"type": "follow", "page": 2, "limit": 5},
            headers=auth_headers(user_id=ME),
        )

        assert response.status_code == 200
        (query,) = feed_handler.queries
        assert query.type == ActivityType.FOLLOW
        assert (query.page, query.limit) == (2, 5)

    def test_feed_rejects_unknown_type(self, client, auth_headers, feed_handler):
        response = client.get(
            "/api/v1/feed", params={"type": "list"}, headers=auth_headers(user_id=ME)
        )

        assert response.status_code == 422
        assert feed_handler.queries == []
