"""Unit tests for query handlers and the user/notification command handlers.

Tests cover:
- Page arithmetic
- Profile privacy (limited view of private profiles)
- Feed actor set and activity type filter
- Review and game list visibility
- Notification ownership and unread counts
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.notification_handlers import (
    MarkAllNotificationsReadHandler,
    MarkNotificationReadHandler,
    NotificationError,
)
from src.application.commands.handlers.user_handlers import (
    ChangeUserRoleHandler,
    DeleteUserHandler,
    UpdateProfileHandler,
    UserCommandError,
)
from src.application.commands.notification_commands import (
    MarkAllNotificationsRead,
    MarkNotificationRead,
)
from src.application.commands.user_commands import (
    ChangeUserRole,
    DeleteUser,
    UpdateProfile,
)
from src.application.dtos.pagination import Page, page_offset
from src.application.queries.game_list_queries import GetGameList, ListGameLists
from src.application.queries.game_queries import ListSimilarGames
from src.application.queries.handlers.game_handlers import (
    GameQueryError,
    ListSimilarGamesHandler,
)
from src.application.queries.handlers.game_list_handlers import (
    GameListQueryError,
    GetGameListHandler,
    ListGameListsHandler,
)
from src.application.queries.handlers.notification_handlers import (
    ListNotificationsHandler,
)
from src.application.queries.handlers.review_handlers import (
    GetReviewHandler,
    ListReviewsHandler,
    ReviewQueryError,
)
from src.application.queries.handlers.social_handlers import (
    GetFeedHandler,
    GetSocialStatsHandler,
    SocialQueryError,
    SuggestFollowsHandler,
)
from src.application.queries.handlers.user_handlers import GetUserProfileHandler
from src.application.queries.notification_queries import ListNotifications
from src.application.queries.review_queries import GetReview, ListReviews
from src.application.queries.social_queries import (
    GetFeed,
    GetSocialStats,
    SuggestFollows,
)
from src.application.queries.user_queries import GetUserProfile
from src.core.result import Failure, Success
from src.domain.entities import Game, GameList, Notification, Review, User
from src.domain.enums import ActivityType, NotificationType, UserRole
from src.domain.protocols import ReviewView


def make_user(**overrides) -> User:
    defaults = {
        "id": uuid7(),
        "email": "pixel@example.com",
        "username": "pixel_knight",
        "password_hash": "hashed",
        "bio": "Collector of 8-bit cartridges",
        "location": "Lisbon",
    }
    return User(**(defaults | overrides))


def make_view(**review_overrides) -> ReviewView:
    defaults = {
        "id": uuid7(),
        "user_id": uuid7(),
        "game_id": uuid7(),
        "title": "Great",
        "content": "Loved it",
        "rating": 9.0,
    }
    return ReviewView(
        review=Review(**(defaults | review_overrides)),
        author_username="author",
        game_title="Hades",
        game_slug="hades",
    )


@pytest.mark.unit
class TestPagination:
    def test_page_offset(self):
        assert page_offset(1, 12) == 0
        assert page_offset(3, 12) == 24
        assert page_offset(0, 12) == 0

    def test_page_properties(self):
        page = Page(items=[1, 2], total=25, page=2, limit=12)

        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_prev is True

    def test_empty_page(self):
        page = Page(items=[], total=0, page=1, limit=12)

        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_prev is False


@pytest.mark.unit
class TestGetUserProfileHandler:
    @pytest.fixture
    def repos(self):
        user_repo, follow_repo, review_repo, list_repo = (AsyncMock() for _ in range(4))
        follow_repo.count_followers.return_value = 3
        follow_repo.count_following.return_value = 5
        follow_repo.exists.return_value = True
        review_repo.list_reviews.return_value = ([make_view()], 7)
        list_repo.list_by_user.return_value = []
        list_repo.count_by_user.return_value = 2
        return user_repo, follow_repo, review_repo, list_repo

    async def test_public_profile(self, repos):
        user_repo, *_ = repos
        user = make_user()
        user_repo.find_by_username.return_value = user
        viewer = uuid7()

        result = await GetUserProfileHandler(*repos).handle(
            GetUserProfile(username=user.username, viewer_id=viewer)
        )

        profile = result.value
        assert profile.is_limited is False
        assert profile.is_following is True
        assert profile.user.bio == user.bio
        assert profile.stats.reviews_count == 7
        assert profile.stats.game_lists_count == 2
        assert len(profile.recent_reviews) == 1

    async def test_private_profile_is_limited_for_strangers(self, repos):
        user_repo, _, review_repo, _ = repos
        user = make_user(is_private=True)
        user_repo.find_by_username.return_value = user

        result = await GetUserProfileHandler(*repos).handle(
            GetUserProfile(username=user.username, viewer_id=None)
        )

        profile = result.value
        assert profile.is_limited is True
        assert profile.user.bio is None
        assert profile.user.location is None
        assert profile.stats.followers_count == 3
        assert profile.stats.reviews_count == 0
        assert profile.recent_reviews == []
        review_repo.list_reviews.assert_not_awaited()
        # Stored entity is untouched
        assert user.bio is not None

    async def test_private_profile_full_for_owner(self, repos):
        user_repo, follow_repo, _, _ = repos
        user = make_user(is_private=True)
        user_repo.find_by_username.return_value = user

        result = await GetUserProfileHandler(*repos).handle(
            GetUserProfile(username=user.username, viewer_id=user.id)
        )

        assert result.value.is_limited is False
        assert result.value.is_following is False
        follow_repo.exists.assert_not_awaited()

    async def test_unknown_user(self, repos):
        user_repo, *_ = repos
        user_repo.find_by_username.return_value = None

        result = await GetUserProfileHandler(*repos).handle(
            GetUserProfile(username="ghost")
        )

        assert isinstance(result, Failure)


@pytest.mark.unit
class TestSocialQueryHandlers:
    async def test_feed_includes_self_and_followed(self):
        user_id, followed = uuid7(), uuid7()
        follow_repo = AsyncMock()
        follow_repo.following_ids.return_value = [followed]
        activity_repo = AsyncMock()
        activity_repo.list_activity.return_value = ([], 0)

        result = await GetFeedHandler(follow_repo, activity_repo).handle(
            GetFeed(user_id=user_id, type=ActivityType.REVIEW, page=2, limit=20)
        )

        assert isinstance(result, Success)
        activity_repo.list_activity.assert_awaited_once_with(
            [user_id, followed], [ActivityType.REVIEW], offset=20, limit=20
        )

    async def test_feed_defaults_to_all_types(self):
        follow_repo = AsyncMock()
        follow_repo.following_ids.return_value = []
        activity_repo = AsyncMock()
        activity_repo.list_activity.return_value = ([], 0)

        await GetFeedHandler(follow_repo, activity_repo).handle(GetFeed(user_id=uuid7()))

        types = activity_repo.list_activity.await_args.args[1]
        assert set(types) == {ActivityType.REVIEW, ActivityType.FOLLOW}

    async def test_stats_for_unknown_user(self):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None

        result = await GetSocialStatsHandler(user_repo, AsyncMock(), AsyncMock()).handle(
            GetSocialStats(user_id=uuid7())
        )

        assert result == Failure(error=SocialQueryError.USER_NOT_FOUND)

    async def test_suggestions(self):
        candidate = make_user()
        follow_repo = AsyncMock()
        follow_repo.suggest_for.return_value = [(candidate, 4)]

        result = await SuggestFollowsHandler(follow_repo).handle(
            SuggestFollows(user_id=uuid7(), limit=5)
        )

        assert result.value[0].user is candidate
        assert result.value[0].mutual_count == 4


@pytest.mark.unit
class TestReviewQueryHandlers:
    async def test_draft_hidden_from_others(self):
        review_repo = AsyncMock()
        review_repo.find_view.return_value = make_view(is_published=False)

        result = await GetReviewHandler(review_repo, AsyncMock()).handle(
            GetReview(review_id=uuid7(), viewer_id=uuid7())
        )

        assert result == Failure(error=ReviewQueryError.REVIEW_NOT_PUBLISHED)

    async def test_is_liked_for_viewer(self):
        view = make_view()
        review_repo = AsyncMock()
        review_repo.find_view.return_value = view
        like_repo = AsyncMock()
        like_repo.exists.return_value = True

        result = await GetReviewHandler(review_repo, like_repo).handle(
            GetReview(review_id=view.review.id, viewer_id=uuid7())
        )

        assert result.value.is_liked is True

    async def test_list_marks_liked_reviews(self):
        liked_view, other_view = make_view(), make_view()
        review_repo = AsyncMock()
        review_repo.list_reviews.return_value = ([liked_view, other_view], 2)
        like_repo = AsyncMock()
        like_repo.liked_review_ids.return_value = {liked_view.review.id}

        result = await ListReviewsHandler(review_repo, like_repo).handle(
            ListReviews(viewer_id=uuid7())
        )

        assert [item.is_liked for item in result.value.items] == [True, False]

    async def test_own_listing_includes_drafts(self):
        viewer = uuid7()
        review_repo = AsyncMock()
        review_repo.list_reviews.return_value = ([], 0)

        await ListReviewsHandler(review_repo, AsyncMock()).handle(
            ListReviews(user_id=viewer, viewer_id=viewer)
        )

        filters = review_repo.list_reviews.await_args.args[0]
        assert filters.include_unpublished_for == viewer


@pytest.mark.unit
class TestGameQueryHandlers:
    async def test_similar_for_unknown_game(self):
        game_repo = AsyncMock()
        game_repo.find_by_id.return_value = None

        result = await ListSimilarGamesHandler(game_repo).handle(
            ListSimilarGames(game_id=uuid7())
        )

        assert result == Failure(error=GameQueryError.GAME_NOT_FOUND)

    async def test_similar_without_genres(self):
        game_repo = AsyncMock()
        game_repo.find_by_id.return_value = Game(id=uuid7(), title="Hades", slug="hades")

        result = await ListSimilarGamesHandler(game_repo).handle(
            ListSimilarGames(game_id=uuid7())
        )

        assert result == Success(value=[])
        game_repo.find_similar.assert_not_awaited()


@pytest.mark.unit
class TestGameListQueryHandlers:
    async def test_private_list_hidden(self):
        list_repo = AsyncMock()
        list_repo.find_by_id.return_value = GameList(
            id=uuid7(), user_id=uuid7(), name="Secret", is_public=False
        )

        result = await GetGameListHandler(list_repo).handle(
            GetGameList(list_id=uuid7(), viewer_id=None)
        )

        assert result == Failure(error=GameListQueryError.LIST_NOT_FOUND)

    async def test_owner_sees_private_lists(self):
        owner = uuid7()
        list_repo = AsyncMock()
        list_repo.list_by_user.return_value = []

        await ListGameListsHandler(list_repo).handle(
            ListGameLists(user_id=owner, viewer_id=owner)
        )
        await ListGameListsHandler(list_repo).handle(
            ListGameLists(user_id=owner, viewer_id=None)
        )

        calls = list_repo.list_by_user.await_args_list
        assert calls[0].kwargs == {"public_only": False}
        assert calls[1].kwargs == {"public_only": True}


@pytest.mark.unit
class TestUserCommandHandlers:
    async def test_update_profile(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user

        result = await UpdateProfileHandler(user_repo).handle(
            UpdateProfile(user_id=user.id, changes={"display_name": "Pixel"})
        )

        assert result.value.display_name == "Pixel"
        user_repo.update.assert_awaited_once_with(user)

    async def test_change_role(self):
        user = make_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user

        result = await ChangeUserRoleHandler(user_repo).handle(
            ChangeUserRole(user_id=user.id, role=UserRole.ADMIN)
        )

        assert result.value.role == UserRole.ADMIN

    async def test_delete_unknown_user(self):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None

        result = await DeleteUserHandler(user_repo).handle(DeleteUser(user_id=uuid7()))

        assert result == Failure(error=UserCommandError.USER_NOT_FOUND)
        user_repo.delete.assert_not_awaited()


@pytest.mark.unit
class TestNotificationHandlers:
    def make_notification(self, user_id, is_read=False) -> Notification:
        return Notification(
            id=uuid7(),
            user_id=user_id,
            type=NotificationType.FOLLOW,
            title="New follower",
            message="someone started following you",
            is_read=is_read,
        )

    async def test_cannot_mark_someone_elses(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = self.make_notification(uuid7())

        result = await MarkNotificationReadHandler(repo).handle(
            MarkNotificationRead(notification_id=uuid7(), user_id=uuid7())
        )

        assert result == Failure(error=NotificationError.NOTIFICATION_NOT_FOUND)
        repo.mark_read.assert_not_awaited()

    async def test_mark_read(self):
        owner = uuid7()
        notification = self.make_notification(owner)
        repo = AsyncMock()
        repo.find_by_id.return_value = notification

        result = await MarkNotificationReadHandler(repo).handle(
            MarkNotificationRead(notification_id=notification.id, user_id=owner)
        )

        assert result == Success(value=None)
        repo.mark_read.assert_awaited_once_with(notification.id)

    async def test_mark_all_read(self):
        repo = AsyncMock()
        repo.mark_all_read.return_value = 4

        result = await MarkAllNotificationsReadHandler(repo).handle(
            MarkAllNotificationsRead(user_id=uuid7())
        )

        assert result == Success(value=4)

    async def test_list_reports_unread_count(self):
        repo = AsyncMock()
        repo.list_for_user.return_value = ([], 0)
        repo.count_unread.return_value = 6

        result = await ListNotificationsHandler(repo).handle(
            ListNotifications(user_id=uuid7(), unread_only=True)
        )

        assert result.value.unread_count == 6
        assert repo.list_for_user.await_args.kwargs["unread_only"] is True
