"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating JWT access tokens.
The token is read from the ``Authorization: Bearer`` header, falling back to
the httpOnly ``authToken`` cookie set by login/registration.

Usage:
    # Protected route (requires auth)
    async def protected_route(current_user: AuthenticatedUser):
        return {"user_id": str(current_user.user_id)}

    # Optional auth route
    async def optional_route(current_user: OptionalUser):
        if current_user:
            return {"user_id": str(current_user.user_id)}
        return {"message": "anonymous"}

    # Admin-only route
    async def admin_route(current_user: AdminUser):
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated, Any
from uuid import UUID

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

ACCESS_TOKEN_COOKIE = "authToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

# auto_error=False so the cookie fallback gets a chance
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
        email: User's email address (from JWT 'email' claim).
        username: Public handle (from JWT 'username' claim).
        roles: User's roles (from JWT 'roles' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    username: str
    roles: list[str]
    token_jti: str | None = None

    @property
    def is_admin(self) -> bool:
        return UserRole.ADMIN.value in self.roles


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _extract_token(
    credentials: HTTPAuthorizationCredentials | None,
    cookie_token: str | None,
) -> str | None:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return cookie_token or None


def _to_current_user(payload: dict[str, Any]) -> CurrentUser:
    """Build CurrentUser from a validated payload.

    Raises:
        KeyError: If a required claim is missing.
        ValueError: If ``sub`` is not a UUID.
    """
    roles_raw = payload.get("roles", [UserRole.USER.value])
    roles = roles_raw if isinstance(roles_raw, list) else [UserRole.USER.value]
    jti_raw = payload.get("jti")
    return CurrentUser(
        user_id=UUID(str(payload["sub"])),
        email=str(payload["email"]),
        username=str(payload.get("username", "")),
        roles=[str(role) for role in roles],
        token_jti=str(jti_raw) if jti_raw else None,
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    auth_token: Annotated[str | None, Cookie(alias=ACCESS_TOKEN_COOKIE)] = None,
) -> CurrentUser:
    """Get current authenticated user from the access token.

    Args:
        credentials: Bearer token from Authorization header (optional).
        token_service: JWT token service (injected).
        auth_token: Access token from the ``authToken`` cookie (optional).

    Returns:
        CurrentUser with user identity from valid JWT.

    Raises:
        HTTPException 401: If token is missing, invalid, or expired.
    """
    token = _extract_token(credentials, auth_token)
    if token is None:
        raise _unauthorized("Not authenticated")

    match token_service.validate_access_token(token):
        case Success(value=payload):
            try:
                return _to_current_user(payload)
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized("Not authenticated")


async def get_current_user_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
    auth_token: Annotated[str | None, Cookie(alias=ACCESS_TOKEN_COOKIE)] = None,
) -> CurrentUser | None:
    """Get current user if authenticated, None otherwise.

    Never raises: missing, malformed or expired tokens all mean anonymous.
    """
    token = _extract_token(credentials, auth_token)
    if token is None:
        return None

    result = token_service.validate_access_token(token)
    if isinstance(result, Failure):
        return None
    try:
        return _to_current_user(result.value)
    except (KeyError, ValueError):
        return None


def require_role(
    required_role: UserRole,
) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires a specific role.

    Args:
        required_role: Role required to access the endpoint.

    Returns:
        Dependency function that validates user has required role.

    Raises:
        HTTPException 403: If user does not have required role.
    """

    async def role_checker(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if required_role.value not in current_user.roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return role_checker


require_admin = require_role(UserRole.ADMIN)

# Type aliases for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
OptionalUser = Annotated[CurrentUser | None, Depends(get_current_user_optional)]
AdminUser = Annotated[CurrentUser, Depends(require_admin)]
