"""Authentication router.

Endpoints:
    POST /api/v1/auth/register         - Create account, sign in (201)
    POST /api/v1/auth/login            - Sign in (200)
    POST /api/v1/auth/refresh          - Rotate refresh token (200)
    POST /api/v1/auth/logout           - Revoke refresh token (204)
    GET  /api/v1/auth/me               - Current user (200)
    POST /api/v1/auth/change-password  - Change password (200)
    POST /api/v1/auth/forgot-password  - Request reset link (202)
    POST /api/v1/auth/reset-password   - Reset password (200)

Successful register/login/refresh set the httpOnly ``authToken`` and
``refreshToken`` cookies in addition to returning the tokens in the body.
"""

from typing import Annotated

from fastapi import Cookie, Depends, Request, Response, status
from fastapi.responses import JSONResponse

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
from src.application.dtos.auth_dtos import AuthTokens
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.user_handlers import (
    GetCurrentUserHandler,
    UserQueryError,
)
from src.application.queries.user_queries import GetCurrentUser
from src.core.config import settings
from src.core.container import (
    get_authenticate_user_handler,
    get_change_password_handler,
    get_confirm_password_reset_handler,
    get_get_current_user_handler,
    get_logout_user_handler,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    AuthenticatedUser,
    OptionalUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    LogoutRequest,
    RefreshRequest,
    RegisterRequest,
    ResetPasswordRequest,
    ResetPasswordResponse,
    UserResponse,
)
from src.schemas.common_schemas import MessageResponse

# =============================================================================
# Error Mapping
# =============================================================================

_AUTH_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    RegistrationError.EMAIL_ALREADY_EXISTS: ApplicationErrorCode.CONFLICT,
    RegistrationError.USERNAME_ALREADY_EXISTS: ApplicationErrorCode.CONFLICT,
    LoginError.INVALID_CREDENTIALS: ApplicationErrorCode.UNAUTHORIZED,
    RefreshError.INVALID_REFRESH_TOKEN: ApplicationErrorCode.UNAUTHORIZED,
    ChangePasswordError.INCORRECT_PASSWORD: ApplicationErrorCode.BAD_REQUEST,
    ChangePasswordError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    PasswordResetConfirmError.INVALID_OR_EXPIRED: ApplicationErrorCode.BAD_REQUEST,
    UserQueryError.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
}


def _client_info(request: Request) -> tuple[str | None, str | None]:
    ip_address = request.client.host if request.client else None
    return ip_address, request.headers.get("user-agent")


# =============================================================================
# Cookies
# =============================================================================


def set_auth_cookies(response: Response, tokens: AuthTokens) -> None:
    """Set httpOnly access/refresh cookies with their token lifetimes."""
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=tokens.access_token,
        max_age=tokens.expires_in,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,  # type: ignore[arg-type]
        path="/",
    )
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=tokens.refresh_token,
        max_age=tokens.refresh_expires_in,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,  # type: ignore[arg-type]
        path="/",
    )


def clear_auth_cookies(response: Response) -> None:
    for key in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            key=key,
            path="/",
            httponly=True,
            secure=settings.auth_cookie_secure,
            samesite=settings.auth_cookie_samesite,  # type: ignore[arg-type]
        )


# =============================================================================
# Handlers
# =============================================================================


async def register(
    request: Request,
    response: Response,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> AuthResponse | JSONResponse:
    """Create an account and sign the new member in.

    POST /api/v1/auth/register → 201 Created

    Returns:
        AuthResponse with tokens and the created user.
        JSONResponse 409 if the email or username is taken.
    """
    ip_address, user_agent = _client_info(request)
    result = await handler.handle(
        RegisterUser(
            email=data.email,
            username=data.username,
            password=data.password,
            display_name=data.display_name,
            ip_address=ip_address,
            user_agent=user_agent,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    set_auth_cookies(response, result.value)
    return AuthResponse.from_dto(result.value)


async def login(
    request: Request,
    response: Response,
    data: LoginRequest,
    handler: AuthenticateUserHandler = Depends(get_authenticate_user_handler),
) -> AuthResponse | JSONResponse:
    """Sign in with email and password.

    POST /api/v1/auth/login → 200 OK

    Unknown email and wrong password both return 401 "Invalid credentials".
    """
    ip_address, user_agent = _client_info(request)
    result = await handler.handle(
        AuthenticateUser(
            email=data.email,
            password=data.password,
            ip_address=ip_address,
            user_agent=user_agent,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    set_auth_cookies(response, result.value)
    return AuthResponse.from_dto(result.value)


async def refresh(
    request: Request,
    response: Response,
    data: RefreshRequest | None = None,
    refresh_cookie: Annotated[str | None, Cookie(alias=REFRESH_TOKEN_COOKIE)] = None,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_access_token_handler),
) -> AuthResponse | JSONResponse:
    """Exchange a refresh token for a new token pair.

    POST /api/v1/auth/refresh → 200 OK

    The token is taken from the body, falling back to the ``refreshToken``
    cookie. The presented token is revoked (rotation).
    """
    token = (data.refresh_token if data else None) or refresh_cookie
    if not token:
        return ErrorResponseBuilder.from_handler_error(
            RefreshError.INVALID_REFRESH_TOKEN, request, _AUTH_ERROR_CODES
        )

    ip_address, user_agent = _client_info(request)
    result = await handler.handle(
        RefreshAccessToken(
            refresh_token=token,
            ip_address=ip_address,
            user_agent=user_agent,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    set_auth_cookies(response, result.value)
    return AuthResponse.from_dto(result.value)


async def logout(
    current_user: OptionalUser,
    data: LogoutRequest | None = None,
    refresh_cookie: Annotated[str | None, Cookie(alias=REFRESH_TOKEN_COOKIE)] = None,
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> Response:
    """Sign out.

    POST /api/v1/auth/logout → 204 No Content

    Revokes the presented refresh token (body or cookie) if there is one and
    clears both auth cookies. Always succeeds.
    """
    token = (data.refresh_token if data else None) or refresh_cookie
    await handler.handle(
        LogoutUser(
            user_id=current_user.user_id if current_user else None,
            refresh_token=token,
        )
    )

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_auth_cookies(response)
    return response


async def get_me(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetCurrentUserHandler = Depends(get_get_current_user_handler),
) -> UserResponse | JSONResponse:
    """GET /api/v1/auth/me → 200 OK"""
    result = await handler.handle(GetCurrentUser(user_id=current_user.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    return UserResponse.from_entity(result.value)


async def change_password(
    request: Request,
    current_user: AuthenticatedUser,
    data: ChangePasswordRequest,
    handler: ChangePasswordHandler = Depends(get_change_password_handler),
) -> MessageResponse | JSONResponse:
    """Change password and revoke every refresh token of the user.

    POST /api/v1/auth/change-password → 200 OK
    """
    result = await handler.handle(
        ChangePassword(
            user_id=current_user.user_id,
            current_password=data.current_password,
            new_password=data.new_password,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    return MessageResponse(message="Password changed. Please sign in again.")


async def forgot_password(
    request: Request,
    data: ForgotPasswordRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> ForgotPasswordResponse:
    """Request a password reset link.

    POST /api/v1/auth/forgot-password → 202 Accepted

    The response is identical whether or not the email is registered.
    """
    ip_address, user_agent = _client_info(request)
    await handler.handle(
        RequestPasswordReset(
            email=data.email,
            ip_address=ip_address,
            user_agent=user_agent,
        )
    )
    return ForgotPasswordResponse()


async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> ResetPasswordResponse | JSONResponse:
    """Set a new password using the emailed reset token.

    POST /api/v1/auth/reset-password → 200 OK

    Any token problem returns 400 "Invalid or expired reset token".
    """
    result = await handler.handle(
        ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_handler_error(
            result.error, request, _AUTH_ERROR_CODES
        )

    return ResetPasswordResponse()
