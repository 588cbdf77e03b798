"""Follow/unfollow command handlers."""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.social_commands import FollowUser, UnfollowUser
from src.core.result import Failure, Result, Success
from src.domain.entities.follow import Follow
from src.domain.errors import DuplicateRecordError
from src.domain.events.social_events import UserFollowed, UserUnfollowed
from src.domain.protocols import EventBusProtocol, FollowRepository, UserRepository


class FollowError:
    """Follow command errors."""

    CANNOT_FOLLOW_SELF = "You cannot follow yourself"
    CANNOT_UNFOLLOW_SELF = "You cannot unfollow yourself"
    USER_NOT_FOUND = "User not found"
    ALREADY_FOLLOWING = "You are already following this user"
    NOT_FOLLOWING = "You are not following this user"


class FollowUserHandler:
    """Handler for FollowUser command. Notifies the followed member."""

    def __init__(
        self,
        follow_repo: FollowRepository,
        user_repo: UserRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._follow_repo = follow_repo
        self._user_repo = user_repo
        self._event_bus = event_bus

    async def handle(self, cmd: FollowUser) -> Result[None, str]:
        if cmd.follower_id == cmd.following_id:
            return Failure(error=FollowError.CANNOT_FOLLOW_SELF)
        if await self._user_repo.find_by_id(cmd.following_id) is None:
            return Failure(error=FollowError.USER_NOT_FOUND)
        if await self._follow_repo.exists(cmd.follower_id, cmd.following_id):
            return Failure(error=FollowError.ALREADY_FOLLOWING)

        try:
            await self._follow_repo.save(
                Follow(
                    id=uuid7(),
                    follower_id=cmd.follower_id,
                    following_id=cmd.following_id,
                    created_at=datetime.now(UTC),
                )
            )
        except DuplicateRecordError:
            return Failure(error=FollowError.ALREADY_FOLLOWING)

        await self._event_bus.publish(
            UserFollowed(
                follower_id=cmd.follower_id,
                follower_username=cmd.follower_username,
                following_id=cmd.following_id,
            )
        )
        return Success(value=None)


class UnfollowUserHandler:
    def __init__(
        self, follow_repo: FollowRepository, event_bus: EventBusProtocol
    ) -> None:
        self._follow_repo = follow_repo
        self._event_bus = event_bus

    async def handle(self, cmd: UnfollowUser) -> Result[None, str]:
        if cmd.follower_id == cmd.following_id:
            return Failure(error=FollowError.CANNOT_UNFOLLOW_SELF)
        if not await self._follow_repo.delete(cmd.follower_id, cmd.following_id):
            return Failure(error=FollowError.NOT_FOLLOWING)

        await self._event_bus.publish(
            UserUnfollowed(
                follower_id=cmd.follower_id,
                following_id=cmd.following_id,
            )
        )
        return Success(value=None)
