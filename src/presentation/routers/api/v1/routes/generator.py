"""Route generator for the API Route Registry.

Converts declarative RouteMetadata entries into FastAPI routes when the v1
router is built.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
    require_admin,
)
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes

    Raises:
        ValueError: If two entries declare the same method and path.
    """
    seen: set[tuple[str, str]] = set()
    for metadata in registry:
        key = (metadata.method.value, metadata.path)
        if key in seen:
            raise ValueError(f"Duplicate route: {key[0]} {key[1]}")
        seen.add(key)

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            dependencies=_build_dependencies(metadata.auth_policy),
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC / OPTIONAL: No dependencies (the handler may still ask for
            OptionalUser)
        AUTHENTICATED: Depends(get_current_user)
        ADMIN: Depends(require_admin), which itself requires a valid token

    FastAPI caches dependencies per request, so a handler that also declares
    AuthenticatedUser does not validate the token twice.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC | AuthLevel.OPTIONAL:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]
        case AuthLevel.ADMIN:
            return [Depends(require_admin)]
        case _:
            # Fail closed
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Game not found")])
        {404: {"description": "Game not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
