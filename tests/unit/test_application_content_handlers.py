"""Unit tests for catalog, review, comment, follow and game list handlers.

Architecture:
- Repository protocols and the event bus are AsyncMocks
- Tests assert on returned Results, repository calls and published events
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.game_commands import (
    CreateCatalogEntry,
    CreateGame,
    DeleteGame,
    UpdateGame,
)
from src.application.commands.game_list_commands import (
    AddGameListEntry,
    DeleteGameList,
    RemoveGameListEntry,
    UpdateGameList,
)
from src.application.commands.handlers.comment_handlers import (
    AddCommentHandler,
    CommentError,
    DeleteCommentHandler,
)
from src.application.commands.handlers.follow_handlers import (
    FollowError,
    FollowUserHandler,
    UnfollowUserHandler,
)
from src.application.commands.handlers.game_handlers import (
    CatalogError,
    CreateCatalogEntryHandler,
    CreateGameHandler,
    DeleteGameHandler,
    GameError,
    UpdateGameHandler,
)
from src.application.commands.handlers.game_list_handlers import (
    AddGameListEntryHandler,
    DeleteGameListHandler,
    GameListError,
    RemoveGameListEntryHandler,
    UpdateGameListHandler,
)
from src.application.commands.handlers.review_handlers import (
    CreateReviewHandler,
    DeleteReviewHandler,
    LikeError,
    LikeReviewHandler,
    ReviewError,
    UnlikeReviewHandler,
    UpdateReviewHandler,
)
from src.application.commands.review_commands import (
    AddComment,
    CreateReview,
    DeleteComment,
    DeleteReview,
    LikeReview,
    UnlikeReview,
    UpdateReview,
)
from src.application.commands.social_commands import FollowUser, UnfollowUser
from src.core.result import Failure, Success
from src.domain.entities import (
    Comment,
    Developer,
    Game,
    GameList,
    GameListEntry,
    Review,
    User,
)
from src.domain.errors import DuplicateRecordError
from src.domain.events.social_events import (
    CommentAdded,
    ReviewDeleted,
    ReviewLiked,
    ReviewPublished,
    UserFollowed,
)
from src.domain.protocols import CatalogKind


def make_game(**overrides) -> Game:
    defaults = {"id": uuid7(), "title": "Hades", "slug": "hades"}
    return Game(**(defaults | overrides))


def make_review(**overrides) -> Review:
    defaults = {
        "id": uuid7(),
        "user_id": uuid7(),
        "game_id": uuid7(),
        "title": "Masterpiece",
        "content": "Every run feels different.",
        "rating": 9.5,
    }
    return Review(**(defaults | overrides))


def published(event_bus: AsyncMock) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.fixture
def game_repo():
    repo = AsyncMock()
    repo.slug_exists.return_value = False
    return repo


@pytest.fixture
def catalog_repo():
    return AsyncMock()


@pytest.fixture
def review_repo():
    return AsyncMock()


@pytest.fixture
def event_bus():
    return AsyncMock()


# =============================================================================
# Games and catalog
# =============================================================================


@pytest.mark.unit
class TestGameHandlers:
    async def test_create_game_derives_slug(self, game_repo, catalog_repo):
        handler = CreateGameHandler(game_repo, catalog_repo)

        result = await handler.handle(CreateGame(title="Hollow Knight: Silksong"))

        assert isinstance(result, Success)
        assert result.value.slug == "hollow-knight-silksong"
        game_repo.save.assert_awaited_once_with(result.value)

    async def test_create_game_title_conflict(self, game_repo, catalog_repo):
        game_repo.slug_exists.return_value = True

        result = await CreateGameHandler(game_repo, catalog_repo).handle(
            CreateGame(title="Hades")
        )

        assert result == Failure(error=GameError.TITLE_CONFLICT)
        game_repo.save.assert_not_awaited()

    async def test_create_game_unknown_developer(self, game_repo, catalog_repo):
        catalog_repo.find_by_ids.return_value = []

        result = await CreateGameHandler(game_repo, catalog_repo).handle(
            CreateGame(title="Hades", developer_id=uuid7())
        )

        assert result == Failure(error=GameError.DEVELOPER_NOT_FOUND)

    async def test_create_game_missing_genre(self, game_repo, catalog_repo):
        genre_ids = [uuid7(), uuid7()]
        catalog_repo.find_by_ids.return_value = ["only-one"]

        result = await CreateGameHandler(game_repo, catalog_repo).handle(
            CreateGame(title="Hades", genre_ids=genre_ids)
        )

        assert result == Failure(error=GameError.GENRES_NOT_FOUND)

    async def test_create_game_deduplicates_platforms(self, game_repo, catalog_repo):
        platform_id = uuid7()
        catalog_repo.find_by_ids.return_value = ["pc"]

        result = await CreateGameHandler(game_repo, catalog_repo).handle(
            CreateGame(title="Hades", platform_ids=[platform_id, platform_id])
        )

        assert result.value.platform_ids == [platform_id]

    async def test_update_game_title_conflict(self, game_repo, catalog_repo):
        game_repo.find_by_id.return_value = make_game()
        game_repo.slug_exists.return_value = True

        result = await UpdateGameHandler(game_repo, catalog_repo).handle(
            UpdateGame(game_id=uuid7(), changes={"title": "Celeste"})
        )

        assert result == Failure(error=GameError.TITLE_CONFLICT)
        game_repo.update.assert_not_awaited()

    async def test_update_game(self, game_repo, catalog_repo):
        game = make_game()
        game_repo.find_by_id.return_value = game

        result = await UpdateGameHandler(game_repo, catalog_repo).handle(
            UpdateGame(game_id=game.id, changes={"summary": "Roguelike"})
        )

        assert result == Success(value=game)
        assert game.summary == "Roguelike"
        game_repo.slug_exists.assert_not_awaited()

    async def test_delete_missing_game(self, game_repo):
        game_repo.find_by_id.return_value = None

        result = await DeleteGameHandler(game_repo).handle(DeleteGame(game_id=uuid7()))

        assert result == Failure(error=GameError.GAME_NOT_FOUND)

    async def test_create_catalog_entry_keeps_known_attributes(self, catalog_repo):
        catalog_repo.slug_exists.return_value = False

        result = await CreateCatalogEntryHandler(catalog_repo).handle(
            CreateCatalogEntry(
                kind=CatalogKind.DEVELOPER,
                name="Supergiant Games",
                attributes={"country": "US", "abbreviation": "ignored"},
            )
        )

        entry = result.value
        assert isinstance(entry, Developer)
        assert entry.slug == "supergiant-games"
        assert entry.country == "US"
        catalog_repo.save.assert_awaited_once_with(CatalogKind.DEVELOPER, entry)

    async def test_create_catalog_entry_conflict(self, catalog_repo):
        catalog_repo.slug_exists.return_value = True

        result = await CreateCatalogEntryHandler(catalog_repo).handle(
            CreateCatalogEntry(kind=CatalogKind.GENRE, name="Roguelike")
        )

        assert result == Failure(error=CatalogError.NAME_CONFLICT)


# =============================================================================
# Reviews and likes
# =============================================================================


@pytest.mark.unit
class TestReviewHandlers:
    async def test_create_review(self, review_repo, game_repo, event_bus):
        game = make_game()
        game_repo.find_by_id.return_value = game
        review_repo.find_by_user_and_game.return_value = None
        review_repo.find_view.return_value = "view"
        handler = CreateReviewHandler(review_repo, game_repo, event_bus)

        result = await handler.handle(
            CreateReview(
                user_id=uuid7(),
                game_id=game.id,
                title="Great",
                content="Loved it",
                rating=9.0,
            )
        )

        assert result == Success(value="view")
        review_repo.save.assert_awaited_once()
        game_repo.refresh_rating_stats.assert_awaited_once_with(game.id)
        assert isinstance(published(event_bus)[0], ReviewPublished)

    async def test_one_review_per_game(self, review_repo, game_repo, event_bus):
        game_repo.find_by_id.return_value = make_game()
        review_repo.find_by_user_and_game.return_value = make_review()

        result = await CreateReviewHandler(review_repo, game_repo, event_bus).handle(
            CreateReview(
                user_id=uuid7(),
                game_id=uuid7(),
                title="Again",
                content="Second take",
                rating=5.0,
            )
        )

        assert result == Failure(error=ReviewError.ALREADY_REVIEWED)

    async def test_concurrent_duplicate_review_is_conflict(
        self, review_repo, game_repo, event_bus
    ):
        game_repo.find_by_id.return_value = make_game()
        review_repo.find_by_user_and_game.return_value = None
        review_repo.save.side_effect = DuplicateRecordError("uq_review_user_game")

        result = await CreateReviewHandler(review_repo, game_repo, event_bus).handle(
            CreateReview(
                user_id=uuid7(),
                game_id=uuid7(),
                title="Again",
                content="Second take",
                rating=5.0,
            )
        )

        assert result == Failure(error=ReviewError.ALREADY_REVIEWED)
        game_repo.refresh_rating_stats.assert_not_awaited()

    async def test_review_unknown_game(self, review_repo, game_repo, event_bus):
        game_repo.find_by_id.return_value = None

        result = await CreateReviewHandler(review_repo, game_repo, event_bus).handle(
            CreateReview(
                user_id=uuid7(), game_id=uuid7(), title="x", content="y", rating=1.0
            )
        )

        assert result == Failure(error=ReviewError.GAME_NOT_FOUND)

    async def test_only_author_updates(self, review_repo, game_repo):
        review_repo.find_by_id.return_value = make_review()

        result = await UpdateReviewHandler(review_repo, game_repo).handle(
            UpdateReview(review_id=uuid7(), user_id=uuid7(), changes={"rating": 1.0})
        )

        assert result == Failure(error=ReviewError.NOT_OWNER_UPDATE)
        game_repo.refresh_rating_stats.assert_not_awaited()

    async def test_update_refreshes_rating(self, review_repo, game_repo):
        review = make_review()
        review_repo.find_by_id.return_value = review
        review_repo.find_view.return_value = "view"

        result = await UpdateReviewHandler(review_repo, game_repo).handle(
            UpdateReview(
                review_id=review.id, user_id=review.user_id, changes={"rating": 6.5}
            )
        )

        assert result == Success(value="view")
        assert review.rating == 6.5
        game_repo.refresh_rating_stats.assert_awaited_once_with(review.game_id)

    async def test_admin_deletes_any_review(self, review_repo, game_repo, event_bus):
        review = make_review()
        review_repo.find_by_id.return_value = review
        admin_id = uuid7()

        result = await DeleteReviewHandler(review_repo, game_repo, event_bus).handle(
            DeleteReview(review_id=review.id, user_id=admin_id, is_admin=True)
        )

        assert result == Success(value=None)
        review_repo.delete.assert_awaited_once_with(review.id)
        event = published(event_bus)[0]
        assert isinstance(event, ReviewDeleted)
        assert event.deleted_by == admin_id

    async def test_stranger_cannot_delete(self, review_repo, game_repo, event_bus):
        review_repo.find_by_id.return_value = make_review()

        result = await DeleteReviewHandler(review_repo, game_repo, event_bus).handle(
            DeleteReview(review_id=uuid7(), user_id=uuid7())
        )

        assert result == Failure(error=ReviewError.NOT_OWNER_DELETE)

    async def test_like_review(self, review_repo, event_bus):
        review = make_review()
        review_repo.find_by_id.return_value = review
        like_repo = AsyncMock()
        like_repo.exists.return_value = False
        liker = uuid7()

        result = await LikeReviewHandler(review_repo, like_repo, event_bus).handle(
            LikeReview(review_id=review.id, user_id=liker, username="fan")
        )

        assert result == Success(value=None)
        event = published(event_bus)[0]
        assert isinstance(event, ReviewLiked)
        assert event.review_author_id == review.user_id
        assert event.liker_username == "fan"

    async def test_cannot_like_twice(self, review_repo, event_bus):
        review_repo.find_by_id.return_value = make_review()
        like_repo = AsyncMock()
        like_repo.exists.return_value = True

        result = await LikeReviewHandler(review_repo, like_repo, event_bus).handle(
            LikeReview(review_id=uuid7(), user_id=uuid7(), username="fan")
        )

        assert result == Failure(error=LikeError.ALREADY_LIKED)
        like_repo.save.assert_not_awaited()

    async def test_concurrent_duplicate_like_is_conflict(self, review_repo, event_bus):
        review_repo.find_by_id.return_value = make_review()
        like_repo = AsyncMock()
        like_repo.exists.return_value = False
        like_repo.save.side_effect = DuplicateRecordError("uq_review_like")

        result = await LikeReviewHandler(review_repo, like_repo, event_bus).handle(
            LikeReview(review_id=uuid7(), user_id=uuid7(), username="fan")
        )

        assert result == Failure(error=LikeError.ALREADY_LIKED)
        event_bus.publish.assert_not_awaited()

    async def test_cannot_like_draft(self, review_repo, event_bus):
        review_repo.find_by_id.return_value = make_review(is_published=False)

        result = await LikeReviewHandler(review_repo, AsyncMock(), event_bus).handle(
            LikeReview(review_id=uuid7(), user_id=uuid7(), username="fan")
        )

        assert result == Failure(error=LikeError.REVIEW_NOT_PUBLISHED)

    async def test_unlike_without_like(self, review_repo):
        review_repo.find_by_id.return_value = make_review()
        like_repo = AsyncMock()
        like_repo.delete.return_value = False

        result = await UnlikeReviewHandler(review_repo, like_repo).handle(
            UnlikeReview(review_id=uuid7(), user_id=uuid7())
        )

        assert result == Failure(error=LikeError.NOT_LIKED)


# =============================================================================
# Comments
# =============================================================================


@pytest.mark.unit
class TestCommentHandlers:
    async def test_add_comment(self, review_repo, event_bus):
        review = make_review()
        review_repo.find_by_id.return_value = review
        comment_repo = AsyncMock()

        result = await AddCommentHandler(comment_repo, review_repo, event_bus).handle(
            AddComment(
                review_id=review.id,
                user_id=uuid7(),
                username="commenter",
                content="Agreed!",
            )
        )

        assert isinstance(result, Success)
        assert result.value.author_username == "commenter"
        assert result.value.comment.content == "Agreed!"
        assert isinstance(published(event_bus)[0], CommentAdded)

    async def test_comment_on_draft(self, review_repo, event_bus):
        review_repo.find_by_id.return_value = make_review(is_published=False)

        result = await AddCommentHandler(AsyncMock(), review_repo, event_bus).handle(
            AddComment(review_id=uuid7(), user_id=uuid7(), username="c", content="x")
        )

        assert result == Failure(error=CommentError.REVIEW_NOT_PUBLISHED)

    async def test_delete_comment_permissions(self):
        author = uuid7()
        comment = Comment(id=uuid7(), user_id=author, review_id=uuid7(), content="hi")
        comment_repo = AsyncMock()
        comment_repo.find_by_id.return_value = comment
        handler = DeleteCommentHandler(comment_repo)

        denied = await handler.handle(DeleteComment(comment_id=comment.id, user_id=uuid7()))
        by_admin = await handler.handle(
            DeleteComment(comment_id=comment.id, user_id=uuid7(), is_admin=True)
        )

        assert denied == Failure(error=CommentError.NOT_OWNER)
        assert by_admin == Success(value=None)


# =============================================================================
# Follows
# =============================================================================


@pytest.mark.unit
class TestFollowHandlers:
    async def test_cannot_follow_self(self, event_bus):
        user_id = uuid7()

        result = await FollowUserHandler(AsyncMock(), AsyncMock(), event_bus).handle(
            FollowUser(follower_id=user_id, follower_username="me", following_id=user_id)
        )

        assert result == Failure(error=FollowError.CANNOT_FOLLOW_SELF)

    async def test_follow_unknown_user(self, event_bus):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None

        result = await FollowUserHandler(AsyncMock(), user_repo, event_bus).handle(
            FollowUser(follower_id=uuid7(), follower_username="me", following_id=uuid7())
        )

        assert result == Failure(error=FollowError.USER_NOT_FOUND)

    async def test_follow(self, event_bus):
        target = User(
            id=uuid7(), email="t@example.com", username="target", password_hash="h"
        )
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = target
        follow_repo = AsyncMock()
        follow_repo.exists.return_value = False

        result = await FollowUserHandler(follow_repo, user_repo, event_bus).handle(
            FollowUser(follower_id=uuid7(), follower_username="me", following_id=target.id)
        )

        assert result == Success(value=None)
        follow_repo.save.assert_awaited_once()
        event = published(event_bus)[0]
        assert isinstance(event, UserFollowed)
        assert event.following_id == target.id

    async def test_already_following(self, event_bus):
        user_repo = AsyncMock()
        follow_repo = AsyncMock()
        follow_repo.exists.return_value = True

        result = await FollowUserHandler(follow_repo, user_repo, event_bus).handle(
            FollowUser(follower_id=uuid7(), follower_username="me", following_id=uuid7())
        )

        assert result == Failure(error=FollowError.ALREADY_FOLLOWING)

    async def test_concurrent_duplicate_follow_is_conflict(self, event_bus):
        user_repo = AsyncMock()
        follow_repo = AsyncMock()
        follow_repo.exists.return_value = False
        follow_repo.save.side_effect = DuplicateRecordError("uq_follow")

        result = await FollowUserHandler(follow_repo, user_repo, event_bus).handle(
            FollowUser(follower_id=uuid7(), follower_username="me", following_id=uuid7())
        )

        assert result == Failure(error=FollowError.ALREADY_FOLLOWING)
        event_bus.publish.assert_not_awaited()

    async def test_unfollow_when_not_following(self, event_bus):
        follow_repo = AsyncMock()
        follow_repo.delete.return_value = False

        result = await UnfollowUserHandler(follow_repo, event_bus).handle(
            UnfollowUser(follower_id=uuid7(), following_id=uuid7())
        )

        assert result == Failure(error=FollowError.NOT_FOLLOWING)
        event_bus.publish.assert_not_awaited()


# =============================================================================
# Game lists
# =============================================================================


@pytest.mark.unit
class TestGameListHandlers:
    @pytest.fixture
    def owner_id(self):
        return uuid7()

    @pytest.fixture
    def game_list(self, owner_id):
        return GameList(id=uuid7(), user_id=owner_id, name="Backlog")

    @pytest.fixture
    def list_repo(self, game_list):
        repo = AsyncMock()
        repo.find_by_id.return_value = game_list
        return repo

    async def test_stranger_gets_forbidden_on_public_list(self, list_repo, game_list):
        result = await UpdateGameListHandler(list_repo).handle(
            UpdateGameList(list_id=game_list.id, user_id=uuid7(), changes={"name": "x"})
        )

        assert result == Failure(error=GameListError.NOT_OWNER)

    async def test_stranger_gets_not_found_on_private_list(self, list_repo, game_list):
        game_list.is_public = False

        result = await DeleteGameListHandler(list_repo).handle(
            DeleteGameList(list_id=game_list.id, user_id=uuid7())
        )

        assert result == Failure(error=GameListError.LIST_NOT_FOUND)
        list_repo.delete.assert_not_awaited()

    async def test_add_entry_appends(self, list_repo, game_list, owner_id, game_repo):
        existing = uuid7()
        game_list.entries = [
            GameListEntry(id=uuid7(), list_id=game_list.id, game_id=existing, order=3)
        ]
        game_repo.find_by_id.return_value = make_game()

        result = await AddGameListEntryHandler(list_repo, game_repo).handle(
            AddGameListEntry(list_id=game_list.id, user_id=owner_id, game_id=uuid7())
        )

        assert result.value.order == 4
        list_repo.add_entry.assert_awaited_once_with(result.value)

    async def test_add_duplicate_entry(self, list_repo, game_list, owner_id, game_repo):
        game_id = uuid7()
        game_list.entries = [
            GameListEntry(id=uuid7(), list_id=game_list.id, game_id=game_id)
        ]
        game_repo.find_by_id.return_value = make_game(id=game_id)

        result = await AddGameListEntryHandler(list_repo, game_repo).handle(
            AddGameListEntry(list_id=game_list.id, user_id=owner_id, game_id=game_id)
        )

        assert result == Failure(error=GameListError.GAME_ALREADY_IN_LIST)

    async def test_concurrent_duplicate_entry_is_conflict(
        self, list_repo, game_list, owner_id, game_repo
    ):
        game_repo.find_by_id.return_value = make_game()
        list_repo.add_entry.side_effect = DuplicateRecordError("uq_list_game")

        result = await AddGameListEntryHandler(list_repo, game_repo).handle(
            AddGameListEntry(list_id=game_list.id, user_id=owner_id, game_id=uuid7())
        )

        assert result == Failure(error=GameListError.GAME_ALREADY_IN_LIST)

    async def test_add_unknown_game(self, list_repo, game_list, owner_id, game_repo):
        game_repo.find_by_id.return_value = None

        result = await AddGameListEntryHandler(list_repo, game_repo).handle(
            AddGameListEntry(list_id=game_list.id, user_id=owner_id, game_id=uuid7())
        )

        assert result == Failure(error=GameListError.GAME_NOT_FOUND)

    async def test_remove_missing_entry(self, list_repo, game_list, owner_id):
        list_repo.remove_entry.return_value = False

        result = await RemoveGameListEntryHandler(list_repo).handle(
            RemoveGameListEntry(list_id=game_list.id, user_id=owner_id, game_id=uuid7())
        )

        assert result == Failure(error=GameListError.GAME_NOT_IN_LIST)
