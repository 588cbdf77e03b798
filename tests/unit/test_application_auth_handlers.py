"""Unit tests for the authentication command handlers.

Tests cover:
- RegisterUserHandler: duplicates, hashing, token issuance, events
- AuthenticateUserHandler: identical failure for unknown email / bad password
- RefreshAccessTokenHandler: rotation, unknown and expired tokens
- LogoutUserHandler: revocation and no-op logout
- ChangePasswordHandler: wrong current password, session revocation
- RequestPasswordResetHandler / ConfirmPasswordResetHandler

Architecture:
- Repositories and event bus are AsyncMocks
- Token services are the real implementations (cheap bcrypt rounds)
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    AuthenticateUser,
    ChangePassword,
    ConfirmPasswordReset,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
)
from src.application.commands.handlers.authenticate_user_handler import (
    AuthenticateUserHandler,
    LoginError,
)
from src.application.commands.handlers.change_password_handler import (
    ChangePasswordError,
    ChangePasswordHandler,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
    PasswordResetConfirmError,
)
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
    RefreshError,
)
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
    RegistrationError,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.services.auth_token_issuer import AuthTokenIssuer
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.domain.errors import DuplicateRecordError
from src.domain.events.auth_events import (
    PasswordResetRequestSucceeded,
    UserLoginFailed,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.protocols import SessionData
from src.infrastructure.security import (
    JWTService,
    PasswordResetTokenService,
    RefreshTokenService,
)

SECRET = "k" * 32


def make_user(**overrides) -> User:
    defaults = {
        "id": uuid7(),
        "email": "pixel@example.com",
        "username": "pixel_knight",
        "password_hash": "hashed",
    }
    return User(**(defaults | overrides))


def published(event_bus: AsyncMock) -> list:
    return [call.args[0] for call in event_bus.publish.call_args_list]


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.find_by_username.return_value = None
    return repo


@pytest.fixture
def session_repo():
    repo = AsyncMock()
    repo.revoke.return_value = True
    repo.revoke_all_for_user.return_value = 2
    return repo


@pytest.fixture
def password_service():
    service = Mock()
    service.hash_password.return_value = "hashed"
    service.verify_password.return_value = True
    return service


@pytest.fixture
def refresh_service():
    return RefreshTokenService(cost_factor=4)


@pytest.fixture
def token_issuer(session_repo, refresh_service):
    return AuthTokenIssuer(JWTService(secret_key=SECRET), refresh_service, session_repo)


@pytest.fixture
def event_bus():
    return AsyncMock()


@pytest.mark.unit
class TestRegisterUserHandler:
    @pytest.fixture
    def handler(self, user_repo, password_service, token_issuer, event_bus):
        return RegisterUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_issuer=token_issuer,
            event_bus=event_bus,
        )

    async def test_register_returns_tokens(
        self, handler, user_repo, session_repo, password_service, event_bus
    ):
        result = await handler.handle(
            RegisterUser(
                email="pixel@example.com",
                username="pixel_knight",
                password="SecurePass123!",
                ip_address="203.0.113.7",
            )
        )

        assert isinstance(result, Success)
        tokens = result.value
        assert tokens.user.username == "pixel_knight"
        assert tokens.user.password_hash == "hashed"
        assert tokens.token_type == "bearer"
        assert tokens.refresh_token
        password_service.hash_password.assert_called_once_with("SecurePass123!")
        user_repo.save.assert_awaited_once()
        session_repo.save.assert_awaited_once()
        saved_session = session_repo.save.await_args.args[0]
        assert saved_session.ip_address == "203.0.113.7"
        assert saved_session.token_hash != tokens.refresh_token
        assert isinstance(published(event_bus)[-1], UserRegistrationSucceeded)

    async def test_duplicate_email(self, handler, user_repo, event_bus):
        user_repo.find_by_email.return_value = make_user()

        result = await handler.handle(
            RegisterUser(
                email="pixel@example.com",
                username="someone_else",
                password="SecurePass123!",
            )
        )

        assert result == Failure(error=RegistrationError.EMAIL_ALREADY_EXISTS)
        user_repo.save.assert_not_awaited()
        assert isinstance(published(event_bus)[-1], UserRegistrationFailed)

    async def test_duplicate_username(self, handler, user_repo):
        user_repo.find_by_username.return_value = make_user()

        result = await handler.handle(
            RegisterUser(
                email="new@example.com",
                username="pixel_knight",
                password="SecurePass123!",
            )
        )

        assert result == Failure(error=RegistrationError.USERNAME_ALREADY_EXISTS)

    async def test_concurrent_registration_reports_taken_username(
        self, handler, user_repo, session_repo, event_bus
    ):
        user_repo.find_by_username.side_effect = [None, make_user()]
        user_repo.save.side_effect = DuplicateRecordError("uq_users_username")

        result = await handler.handle(
            RegisterUser(
                email="new@example.com",
                username="pixel_knight",
                password="SecurePass123!",
            )
        )

        assert result == Failure(error=RegistrationError.USERNAME_ALREADY_EXISTS)
        session_repo.save.assert_not_awaited()
        assert isinstance(published(event_bus)[-1], UserRegistrationFailed)


@pytest.mark.unit
class TestAuthenticateUserHandler:
    @pytest.fixture
    def handler(self, user_repo, password_service, token_issuer, event_bus):
        return AuthenticateUserHandler(
            user_repo=user_repo,
            password_service=password_service,
            token_issuer=token_issuer,
            event_bus=event_bus,
        )

    async def test_login_success(self, handler, user_repo):
        user = make_user()
        user_repo.find_by_email.return_value = user

        result = await handler.handle(
            AuthenticateUser(email="pixel@example.com", password="SecurePass123!")
        )

        assert isinstance(result, Success)
        assert result.value.user is user

    async def test_unknown_email_and_wrong_password_fail_identically(
        self, handler, user_repo, password_service, event_bus
    ):
        unknown = await handler.handle(
            AuthenticateUser(email="ghost@example.com", password="whatever")
        )

        user_repo.find_by_email.return_value = make_user()
        password_service.verify_password.return_value = False
        wrong = await handler.handle(
            AuthenticateUser(email="pixel@example.com", password="wrong")
        )

        assert unknown == wrong == Failure(error=LoginError.INVALID_CREDENTIALS)
        reasons = [e.reason for e in published(event_bus) if isinstance(e, UserLoginFailed)]
        assert reasons == [LoginError.USER_NOT_FOUND, LoginError.INVALID_PASSWORD]


@pytest.mark.unit
class TestRefreshAccessTokenHandler:
    @pytest.fixture
    def handler(self, user_repo, session_repo, refresh_service, token_issuer, event_bus):
        return RefreshAccessTokenHandler(
            user_repo=user_repo,
            session_repo=session_repo,
            refresh_token_service=refresh_service,
            token_issuer=token_issuer,
            event_bus=event_bus,
        )

    def make_session(self, refresh_service, user_id, expires_at=None):
        issued = refresh_service.generate_token()
        session = SessionData(
            id=uuid7(),
            user_id=user_id,
            lookup_digest=issued.lookup_digest,
            token_hash=issued.token_hash,
            expires_at=expires_at or issued.expires_at,
        )
        return issued.token, session

    async def test_rotates_session(
        self, handler, user_repo, session_repo, refresh_service
    ):
        user = make_user()
        user_repo.find_by_id.return_value = user
        token, session = self.make_session(refresh_service, user.id)
        session_repo.find_active_by_digest.return_value = session

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert isinstance(result, Success)
        assert result.value.refresh_token != token
        session_repo.revoke.assert_awaited_once_with(session.id, "rotated")
        session_repo.save.assert_awaited_once()

    async def test_unknown_token(self, handler, session_repo):
        session_repo.find_active_by_digest.return_value = None

        result = await handler.handle(
            RefreshAccessToken(refresh_token="unknown-refresh-token-value")
        )

        assert result == Failure(error=RefreshError.INVALID_REFRESH_TOKEN)
        session_repo.revoke.assert_not_awaited()

    async def test_expired_session(
        self, handler, user_repo, session_repo, refresh_service
    ):
        user = make_user()
        user_repo.find_by_id.return_value = user
        token, session = self.make_session(
            refresh_service, user.id, expires_at=datetime.now(UTC) - timedelta(seconds=1)
        )
        session_repo.find_active_by_digest.return_value = session

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=RefreshError.INVALID_REFRESH_TOKEN)

    async def test_token_rotated_concurrently_issues_nothing(
        self, handler, user_repo, session_repo, refresh_service, event_bus
    ):
        user = make_user()
        user_repo.find_by_id.return_value = user
        token, session = self.make_session(refresh_service, user.id)
        session_repo.find_active_by_digest.return_value = session
        session_repo.revoke.return_value = False

        result = await handler.handle(RefreshAccessToken(refresh_token=token))

        assert result == Failure(error=RefreshError.INVALID_REFRESH_TOKEN)
        session_repo.save.assert_not_awaited()
        assert published(event_bus)[-1].reason == RefreshError.TOKEN_ALREADY_ROTATED


@pytest.mark.unit
class TestLogoutUserHandler:
    async def test_revokes_matching_session(self, session_repo, refresh_service, event_bus):
        issued = refresh_service.generate_token()
        user_id = uuid7()
        session = SessionData(
            id=uuid7(),
            user_id=user_id,
            lookup_digest=issued.lookup_digest,
            token_hash=issued.token_hash,
            expires_at=issued.expires_at,
        )
        session_repo.find_active_by_digest.return_value = session
        handler = LogoutUserHandler(session_repo, refresh_service, event_bus)

        result = await handler.handle(LogoutUser(refresh_token=issued.token))

        assert result == Success(value=None)
        session_repo.revoke.assert_awaited_once_with(session.id, "logout")
        assert published(event_bus)[-1].session_revoked is True

    async def test_other_users_session_is_left_alone(
        self, session_repo, refresh_service, event_bus
    ):
        issued = refresh_service.generate_token()
        session_repo.find_active_by_digest.return_value = SessionData(
            id=uuid7(),
            user_id=uuid7(),
            lookup_digest=issued.lookup_digest,
            token_hash=issued.token_hash,
            expires_at=issued.expires_at,
        )
        handler = LogoutUserHandler(session_repo, refresh_service, event_bus)

        await handler.handle(LogoutUser(user_id=uuid7(), refresh_token=issued.token))

        session_repo.revoke.assert_not_awaited()

    async def test_logout_without_token(self, session_repo, refresh_service, event_bus):
        handler = LogoutUserHandler(session_repo, refresh_service, event_bus)

        result = await handler.handle(LogoutUser())

        assert result == Success(value=None)
        session_repo.find_active_by_digest.assert_not_awaited()


@pytest.mark.unit
class TestChangePasswordHandler:
    @pytest.fixture
    def handler(self, user_repo, session_repo, password_service, event_bus):
        return ChangePasswordHandler(user_repo, session_repo, password_service, event_bus)

    async def test_change_password_revokes_sessions(
        self, handler, user_repo, session_repo, password_service
    ):
        user = make_user(password_hash="old")
        user_repo.find_by_id.return_value = user
        password_service.hash_password.return_value = "new"

        result = await handler.handle(
            ChangePassword(
                user_id=user.id,
                current_password="OldPass123!",
                new_password="NewPass123!",
            )
        )

        assert result == Success(value=None)
        assert user.password_hash == "new"
        user_repo.update.assert_awaited_once_with(user)
        session_repo.revoke_all_for_user.assert_awaited_once_with(
            user.id, "password_changed"
        )

    async def test_wrong_current_password(
        self, handler, user_repo, session_repo, password_service
    ):
        user_repo.find_by_id.return_value = make_user()
        password_service.verify_password.return_value = False

        result = await handler.handle(
            ChangePassword(
                user_id=uuid7(),
                current_password="Wrong123!",
                new_password="NewPass123!",
            )
        )

        assert result == Failure(error=ChangePasswordError.INCORRECT_PASSWORD)
        session_repo.revoke_all_for_user.assert_not_awaited()


@pytest.mark.unit
class TestPasswordResetHandlers:
    @pytest.fixture
    def reset_service(self):
        return PasswordResetTokenService(secret_key=SECRET, cost_factor=4)

    async def test_request_for_unknown_email_still_succeeds(
        self, user_repo, reset_service, event_bus
    ):
        handler = RequestPasswordResetHandler(user_repo, reset_service, event_bus)

        result = await handler.handle(RequestPasswordReset(email="ghost@example.com"))

        assert result == Success(value=None)
        user_repo.update.assert_not_awaited()

    async def test_request_then_confirm(
        self, user_repo, session_repo, password_service, reset_service, event_bus
    ):
        user = make_user()
        user_repo.find_by_email.return_value = user
        user_repo.find_by_id.return_value = user

        await RequestPasswordResetHandler(user_repo, reset_service, event_bus).handle(
            RequestPasswordReset(email=user.email)
        )
        sent = published(event_bus)[-1]
        assert isinstance(sent, PasswordResetRequestSucceeded)
        assert user.has_valid_reset_token() is True

        password_service.hash_password.return_value = "reset-hash"
        confirm = ConfirmPasswordResetHandler(
            user_repo, session_repo, password_service, reset_service, event_bus
        )
        result = await confirm.handle(
            ConfirmPasswordReset(token=sent.reset_token, new_password="NewPass123!")
        )

        assert result == Success(value=None)
        assert user.password_hash == "reset-hash"
        assert user.reset_token_hash is None
        session_repo.revoke_all_for_user.assert_awaited_once()

        # Single use
        reused = await confirm.handle(
            ConfirmPasswordReset(token=sent.reset_token, new_password="Other123!!")
        )
        assert reused == Failure(error=PasswordResetConfirmError.INVALID_OR_EXPIRED)

    async def test_superseded_token_is_rejected(
        self, user_repo, session_repo, password_service, reset_service, event_bus
    ):
        user = make_user()
        user_repo.find_by_email.return_value = user
        user_repo.find_by_id.return_value = user
        request = RequestPasswordResetHandler(user_repo, reset_service, event_bus)

        await request.handle(RequestPasswordReset(email=user.email))
        first_token = published(event_bus)[-1].reset_token
        await request.handle(RequestPasswordReset(email=user.email))

        result = await ConfirmPasswordResetHandler(
            user_repo, session_repo, password_service, reset_service, event_bus
        ).handle(ConfirmPasswordReset(token=first_token, new_password="NewPass123!"))

        assert result == Failure(error=PasswordResetConfirmError.INVALID_OR_EXPIRED)

    async def test_garbage_token(
        self, user_repo, session_repo, password_service, reset_service, event_bus
    ):
        result = await ConfirmPasswordResetHandler(
            user_repo, session_repo, password_service, reset_service, event_bus
        ).handle(
            ConfirmPasswordReset(
                token="this-is-not-a-jwt-token", new_password="NewPass123!"
            )
        )

        assert result == Failure(error=PasswordResetConfirmError.INVALID_OR_EXPIRED)
        user_repo.find_by_id.assert_not_awaited()
