"""Profile and user administration command handlers."""

from src.application.commands.user_commands import (
    ChangeUserRole,
    DeleteUser,
    UpdateProfile,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import UserRepository


class UserCommandError:
    """User command errors."""

    USER_NOT_FOUND = "User not found"


class UpdateProfileHandler:
    """Apply a partial update to the caller's own profile."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: UpdateProfile) -> Result[User, str]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=UserCommandError.USER_NOT_FOUND)

        user.apply_profile_changes(cmd.changes)
        await self._user_repo.update(user)
        return Success(value=user)


class ChangeUserRoleHandler:
    """Administrator changes a member's role."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: ChangeUserRole) -> Result[User, str]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(error=UserCommandError.USER_NOT_FOUND)

        user.change_role(cmd.role)
        await self._user_repo.update(user)
        return Success(value=user)


class DeleteUserHandler:
    """Administrator deletes a member.

    Reviews, comments, likes, follows, lists, sessions and notifications go
    with the user through ON DELETE CASCADE.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: DeleteUser) -> Result[None, str]:
        if await self._user_repo.find_by_id(cmd.user_id) is None:
            return Failure(error=UserCommandError.USER_NOT_FOUND)

        await self._user_repo.delete(cmd.user_id)
        return Success(value=None)
