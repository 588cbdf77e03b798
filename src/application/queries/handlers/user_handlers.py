"""User and profile query handlers.

Architecture:
- Returns Result[DTO, str] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from dataclasses import replace

from src.application.dtos.pagination import Page, page_offset
from src.application.dtos.profile_dtos import ProfileStats, UserProfile
from src.application.queries.user_queries import (
    GetCurrentUser,
    GetUserProfile,
    ListFollowers,
    ListFollowing,
    ListUsers,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import (
    FollowRepository,
    GameListRepository,
    ReviewFilters,
    ReviewRepository,
    UserRepository,
)

PROFILE_RECENT_REVIEWS = 5
PROFILE_RECENT_LISTS = 3


class UserQueryError:
    USER_NOT_FOUND = "User not found"


class GetCurrentUserHandler:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetCurrentUser) -> Result[User, str]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=UserQueryError.USER_NOT_FOUND)
        return Success(value=user)


class ListUsersHandler:
    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[Page[User], str]:
        users, total = await self._user_repo.list_users(
            search=query.search,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )
        return Success(
            value=Page(items=users, total=total, page=query.page, limit=query.limit)
        )


class GetUserProfileHandler:
    """Build a profile page.

    A private profile viewed by anyone but its owner comes back limited:
    bio, location and website are blanked, recent reviews and lists are
    omitted and their counts are zero. Follower counts stay visible.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        follow_repo: FollowRepository,
        review_repo: ReviewRepository,
        list_repo: GameListRepository,
    ) -> None:
        self._user_repo = user_repo
        self._follow_repo = follow_repo
        self._review_repo = review_repo
        self._list_repo = list_repo

    async def handle(self, query: GetUserProfile) -> Result[UserProfile, str]:
        user = await self._user_repo.find_by_username(query.username)
        if user is None:
            return Failure(error=UserQueryError.USER_NOT_FOUND)

        is_following = False
        if query.viewer_id is not None and query.viewer_id != user.id:
            is_following = await self._follow_repo.exists(query.viewer_id, user.id)

        followers_count = await self._follow_repo.count_followers(user.id)
        following_count = await self._follow_repo.count_following(user.id)

        if not user.can_view_full_profile(query.viewer_id):
            return Success(
                value=UserProfile(
                    user=replace(user, bio=None, location=None, website=None),
                    stats=ProfileStats(
                        reviews_count=0,
                        followers_count=followers_count,
                        following_count=following_count,
                        game_lists_count=0,
                    ),
                    is_following=is_following,
                    is_limited=True,
                )
            )

        is_owner = query.viewer_id == user.id
        recent_reviews, reviews_count = await self._review_repo.list_reviews(
            ReviewFilters(user_id=user.id),
            offset=0,
            limit=PROFILE_RECENT_REVIEWS,
        )
        recent_lists = await self._list_repo.list_by_user(
            user.id, public_only=True, limit=PROFILE_RECENT_LISTS
        )
        lists_count = await self._list_repo.count_by_user(
            user.id, public_only=not is_owner
        )

        return Success(
            value=UserProfile(
                user=user,
                stats=ProfileStats(
                    reviews_count=reviews_count,
                    followers_count=followers_count,
                    following_count=following_count,
                    game_lists_count=lists_count,
                ),
                is_following=is_following,
                recent_reviews=recent_reviews,
                recent_lists=recent_lists,
            )
        )


class ListFollowersHandler:
    def __init__(
        self, user_repo: UserRepository, follow_repo: FollowRepository
    ) -> None:
        self._user_repo = user_repo
        self._follow_repo = follow_repo

    async def handle(self, query: ListFollowers) -> Result[Page[User], str]:
        user = await self._user_repo.find_by_username(query.username)
        if user is None:
            return Failure(error=UserQueryError.USER_NOT_FOUND)

        users, total = await self._follow_repo.list_followers(
            user.id, offset=page_offset(query.page, query.limit), limit=query.limit
        )
        return Success(
            value=Page(items=users, total=total, page=query.page, limit=query.limit)
        )


class ListFollowingHandler:
    def __init__(
        self, user_repo: UserRepository, follow_repo: FollowRepository
    ) -> None:
        self._user_repo = user_repo
        self._follow_repo = follow_repo

    async def handle(self, query: ListFollowing) -> Result[Page[User], str]:
        user = await self._user_repo.find_by_username(query.username)
        if user is None:
            return Failure(error=UserQueryError.USER_NOT_FOUND)

        users, total = await self._follow_repo.list_following(
            user.id, offset=page_offset(query.page, query.limit), limit=query.limit
        )
        return Success(
            value=Page(items=users, total=total, page=query.page, limit=query.limit)
        )
