"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all API routes: FastAPI
routes, auth dependencies and OpenAPI error documentation are generated
from it at import time.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, errors)
    HTTPMethod: HTTP method enum (GET, POST, PATCH, PUT, DELETE)
    AuthPolicy / AuthLevel: Who may call the route
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/register",
        handler=register,
        resource="auth",
        tags=["Authentication"],
        summary="Register",
        response_model=AuthResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.PUBLIC),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (e.g., registration, game listing)
        OPTIONAL: Works anonymously; the caller is resolved when a token is sent
        AUTHENTICATED: Requires a valid access token
        ADMIN: Requires the admin role
    """

    PUBLIC = "public"
    OPTIONAL = "optional"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level
        rationale: Optional explanation, e.g. why a mutating route is public

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.ADMIN)
        >>> AuthPolicy(
        ...     level=AuthLevel.PUBLIC,
        ...     rationale="Refresh token is the credential",
        ... )
    """

    level: AuthLevel
    rationale: str | None = None


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST, PATCH)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=404, description="Game not found")
        >>> ErrorSpec(status=409, description="Email already registered")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the version prefix (e.g., "/games/{slug}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "games", "reviews")
        tags: OpenAPI tags (e.g., ["Games"])

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description (markdown supported)
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201, 204)
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        auth_policy: Authentication policy
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    deprecated: bool = False
