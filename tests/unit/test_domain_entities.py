"""Unit tests for domain entities.

Tests cover:
- User: role checks, profile visibility, partial updates, reset tokens
- Game: partial updates and slug regeneration
- Review: visibility of drafts, previews
- GameList: ownership, visibility, entry ordering
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.domain.entities import Game, GameList, GameListEntry, Review, User
from src.domain.entities.review import truncate_preview
from src.domain.enums import UserRole


def make_user(**overrides) -> User:
    defaults = {
        "id": uuid7(),
        "email": "pixel@example.com",
        "username": "pixel_knight",
        "password_hash": "$2b$04$hash",
    }
    return User(**(defaults | overrides))


@pytest.mark.unit
class TestUser:
    def test_defaults(self):
        user = make_user()

        assert user.role == UserRole.USER
        assert user.is_admin() is False
        assert user.is_private is False
        assert user.language == "en"
        assert user.timezone == "UTC"

    def test_admin(self):
        assert make_user(role=UserRole.ADMIN).is_admin() is True

    def test_public_profile_visible_to_anonymous(self):
        assert make_user().can_view_full_profile(None) is True

    def test_private_profile_visible_only_to_owner(self):
        user = make_user(is_private=True)

        assert user.can_view_full_profile(None) is False
        assert user.can_view_full_profile(uuid7()) is False
        assert user.can_view_full_profile(user.id) is True

    def test_apply_profile_changes_ignores_credentials(self):
        user = make_user()

        user.apply_profile_changes(
            {
                "bio": "Speedrunner",
                "is_private": True,
                "password_hash": "injected",
                "role": UserRole.ADMIN,
            }
        )

        assert user.bio == "Speedrunner"
        assert user.is_private is True
        assert user.password_hash == "$2b$04$hash"
        assert user.role == UserRole.USER

    def test_change_role(self):
        user = make_user()

        user.change_role(UserRole.MODERATOR)

        assert user.role == UserRole.MODERATOR

    @freeze_time("2026-05-01 10:00:00")
    def test_reset_token_lifecycle(self):
        user = make_user()
        assert user.has_valid_reset_token() is False

        user.set_reset_token("hash", datetime.now(UTC) + timedelta(hours=1))
        assert user.has_valid_reset_token() is True

        user.change_password_hash("$2b$04$new")

        assert user.password_hash == "$2b$04$new"
        assert user.reset_token_hash is None
        assert user.has_valid_reset_token() is False

    def test_expired_reset_token(self):
        user = make_user()

        with freeze_time("2026-05-01 10:00:00"):
            user.set_reset_token("hash", datetime.now(UTC) + timedelta(hours=1))

        with freeze_time("2026-05-01 11:00:01"):
            assert user.has_valid_reset_token() is False


@pytest.mark.unit
class TestGame:
    def test_title_change_regenerates_slug(self):
        game = Game(id=uuid7(), title="Hades", slug="hades")

        slug_changed = game.apply_changes({"title": "Hades II"})

        assert slug_changed is True
        assert game.slug == "hades-ii"

    def test_other_changes_keep_slug(self):
        game = Game(id=uuid7(), title="Hades", slug="hades")

        slug_changed = game.apply_changes({"summary": "Roguelike"})

        assert slug_changed is False
        assert game.slug == "hades"
        assert game.summary == "Roguelike"

    def test_rating_is_not_editable(self):
        game = Game(id=uuid7(), title="Hades", slug="hades")

        game.apply_changes({"average_rating": 10.0, "review_count": 99})

        assert game.average_rating == 0.0
        assert game.review_count == 0


@pytest.mark.unit
class TestReview:
    def test_draft_visible_only_to_author(self):
        author = uuid7()
        review = Review(
            id=uuid7(),
            user_id=author,
            game_id=uuid7(),
            title="Draft",
            content="Work in progress",
            rating=7.0,
            is_published=False,
        )

        assert review.is_visible_to(author) is True
        assert review.is_visible_to(uuid7()) is False
        assert review.is_visible_to(None) is False

    def test_apply_changes(self):
        review = Review(
            id=uuid7(),
            user_id=uuid7(),
            game_id=uuid7(),
            title="Great",
            content="Loved it",
            rating=9.0,
        )

        review.apply_changes({"rating": 8.5, "user_id": uuid7()})

        assert review.rating == 8.5

    def test_truncate_preview(self):
        assert truncate_preview("short", 10) == "short"
        assert truncate_preview("a" * 12, 10) == "a" * 10 + "..."


@pytest.mark.unit
class TestGameList:
    def make_list(self, **overrides) -> GameList:
        defaults = {"id": uuid7(), "user_id": uuid7(), "name": "Backlog"}
        return GameList(**(defaults | overrides))

    def test_private_list_visible_only_to_owner(self):
        game_list = self.make_list(is_public=False)

        assert game_list.is_visible_to(game_list.user_id) is True
        assert game_list.is_visible_to(uuid7()) is False
        assert game_list.is_visible_to(None) is False

    def test_next_order_appends(self):
        game_list = self.make_list()
        assert game_list.next_order() == 0

        game_list.entries = [
            GameListEntry(id=uuid7(), list_id=game_list.id, game_id=uuid7(), order=0),
            GameListEntry(id=uuid7(), list_id=game_list.id, game_id=uuid7(), order=4),
        ]

        assert game_list.next_order() == 5

    def test_contains_game(self):
        game_list = self.make_list()
        game_id = uuid7()
        game_list.entries = [
            GameListEntry(id=uuid7(), list_id=game_list.id, game_id=game_id)
        ]

        assert game_list.contains_game(game_id) is True
        assert game_list.contains_game(uuid7()) is False

    def test_apply_changes(self):
        game_list = self.make_list()

        game_list.apply_changes({"name": "Favorites", "is_public": False})

        assert game_list.name == "Favorites"
        assert game_list.is_public is False
