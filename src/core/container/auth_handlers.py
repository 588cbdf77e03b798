"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Registration and login
- Access token refresh (with refresh token rotation)
- Logout and password change
- Password reset (request and confirm)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_db_session,
    get_password_reset_token_service,
    get_password_service,
    get_refresh_token_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.services.auth_token_issuer import AuthTokenIssuer
    from src.infrastructure.persistence.repositories import SessionRepository


def _build_token_issuer(session_repo: "SessionRepository") -> "AuthTokenIssuer":
    from src.application.services.auth_token_issuer import AuthTokenIssuer

    return AuthTokenIssuer(
        token_service=get_token_service(),
        refresh_token_service=get_refresh_token_service(),
        session_repo=session_repo,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Creates new handler instance per request with all required dependencies:
    - UserRepository (request-scoped, uses session)
    - SessionRepository (request-scoped, uses session, via AuthTokenIssuer)
    - BcryptPasswordService (app-scoped singleton)
    - EventBus (app-scoped singleton)

    Returns:
        RegisterUserHandler instance.

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return RegisterUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_issuer=_build_token_issuer(SessionRepository(session=session)),
        event_bus=get_event_bus(),
    )


async def get_authenticate_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "AuthenticateUserHandler":
    """Get AuthenticateUser command handler (request-scoped).

    Returns:
        AuthenticateUserHandler instance.
    """
    from src.application.commands.handlers.authenticate_user_handler import (
        AuthenticateUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return AuthenticateUserHandler(
        user_repo=UserRepository(session=session),
        password_service=get_password_service(),
        token_issuer=_build_token_issuer(SessionRepository(session=session)),
        event_bus=get_event_bus(),
    )


async def get_refresh_access_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped).

    The handler and its token issuer share one SessionRepository so that
    revoking the presented token and saving its replacement happen in the
    same transaction.
    """
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    session_repo = SessionRepository(session=session)
    return RefreshAccessTokenHandler(
        user_repo=UserRepository(session=session),
        session_repo=session_repo,
        refresh_token_service=get_refresh_token_service(),
        token_issuer=_build_token_issuer(session_repo),
        event_bus=get_event_bus(),
    )


async def get_logout_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LogoutUserHandler":
    from src.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )
    from src.infrastructure.persistence.repositories import SessionRepository

    return LogoutUserHandler(
        session_repo=SessionRepository(session=session),
        refresh_token_service=get_refresh_token_service(),
        event_bus=get_event_bus(),
    )


async def get_change_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ChangePasswordHandler":
    """Get ChangePassword command handler (request-scoped)."""
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return ChangePasswordHandler(
        user_repo=UserRepository(session=session),
        session_repo=SessionRepository(session=session),
        password_service=get_password_service(),
        event_bus=get_event_bus(),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped).

    Email delivery is not done here: the handler publishes
    PasswordResetRequestSucceeded and EmailEventHandler picks it up.

    Returns:
        RequestPasswordResetHandler instance.
    """
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return RequestPasswordResetHandler(
        user_repo=UserRepository(session=session),
        reset_token_service=get_password_reset_token_service(),
        event_bus=get_event_bus(),
    )


async def get_confirm_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordReset command handler (request-scoped).

    Returns:
        ConfirmPasswordResetHandler instance.
    """
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import (
        SessionRepository,
        UserRepository,
    )

    return ConfirmPasswordResetHandler(
        user_repo=UserRepository(session=session),
        session_repo=SessionRepository(session=session),
        password_service=get_password_service(),
        reset_token_service=get_password_reset_token_service(),
        event_bus=get_event_bus(),
    )
