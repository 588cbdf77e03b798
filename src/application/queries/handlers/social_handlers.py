"""Social graph and activity feed query handlers."""

from uuid import UUID

from src.application.dtos.pagination import Page, page_offset
from src.application.dtos.profile_dtos import FollowSuggestion, SocialStats
from src.application.queries.social_queries import (
    GetFeed,
    GetMutualFollows,
    GetSocialStats,
    IsFollowing,
    SuggestFollows,
)
from src.core.result import Failure, Result, Success
from src.domain.enums import ActivityType
from src.domain.protocols import (
    Activity,
    ActivityRepository,
    FollowRepository,
    ReviewRepository,
    UserRepository,
)


class SocialQueryError:
    USER_NOT_FOUND = "User not found"


class IsFollowingHandler:
    def __init__(self, follow_repo: FollowRepository) -> None:
        self._follow_repo = follow_repo

    async def handle(self, query: IsFollowing) -> Result[bool, str]:
        return Success(
            value=await self._follow_repo.exists(query.follower_id, query.following_id)
        )


class GetFeedHandler:
    """Published reviews and follows by the caller and everyone they follow."""

    def __init__(
        self, follow_repo: FollowRepository, activity_repo: ActivityRepository
    ) -> None:
        self._follow_repo = follow_repo
        self._activity_repo = activity_repo

    async def handle(self, query: GetFeed) -> Result[Page[Activity], str]:
        actor_ids = [query.user_id, *await self._follow_repo.following_ids(query.user_id)]
        types = [query.type] if query.type is not None else list(ActivityType)

        activities, total = await self._activity_repo.list_activity(
            actor_ids,
            types,
            offset=page_offset(query.page, query.limit),
            limit=query.limit,
        )
        return Success(
            value=Page(
                items=activities, total=total, page=query.page, limit=query.limit
            )
        )


class GetSocialStatsHandler:
    def __init__(
        self,
        user_repo: UserRepository,
        follow_repo: FollowRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._user_repo = user_repo
        self._follow_repo = follow_repo
        self._review_repo = review_repo

    async def handle(self, query: GetSocialStats) -> Result[SocialStats, str]:
        if await self._user_repo.find_by_id(query.user_id) is None:
            return Failure(error=SocialQueryError.USER_NOT_FOUND)

        return Success(
            value=SocialStats(
                followers_count=await self._follow_repo.count_followers(query.user_id),
                following_count=await self._follow_repo.count_following(query.user_id),
                reviews_count=await self._review_repo.count_published_by_user(
                    query.user_id
                ),
                likes_received=await self._review_repo.count_likes_received(
                    query.user_id
                ),
            )
        )


class GetMutualFollowsHandler:
    def __init__(
        self, user_repo: UserRepository, follow_repo: FollowRepository
    ) -> None:
        self._user_repo = user_repo
        self._follow_repo = follow_repo

    async def handle(self, query: GetMutualFollows) -> Result[list[UUID], str]:
        if await self._user_repo.find_by_id(query.other_id) is None:
            return Failure(error=SocialQueryError.USER_NOT_FOUND)
        return Success(
            value=await self._follow_repo.mutual_following_ids(
                query.user_id, query.other_id
            )
        )


class SuggestFollowsHandler:
    """Friends-of-friends ranked by mutual connections."""

    def __init__(self, follow_repo: FollowRepository) -> None:
        self._follow_repo = follow_repo

    async def handle(self, query: SuggestFollows) -> Result[list[FollowSuggestion], str]:
        rows = await self._follow_repo.suggest_for(query.user_id, query.limit)
        return Success(
            value=[FollowSuggestion(user=user, mutual_count=count) for user, count in rows]
        )
