"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of
truth by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Auth policies match the handler signatures
4. Metadata is consistent across entries
"""

import inspect

import pytest
from fastapi import APIRouter

from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    HTTPMethod,
    IdempotencyLevel,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


def _annotations(handler) -> list[str]:
    return [str(param.annotation) for param in inspect.signature(handler).parameters.values()]


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


@pytest.mark.api
class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        actual_routes = {
            f"{method} {route.path}"
            for route in v1_router.routes
            for method in getattr(route, "methods", set())
            if method not in {"HEAD", "OPTIONS"}
        }
        expected_routes = {
            f"{entry.method.value} /api/v1{entry.path}" for entry in ROUTE_REGISTRY
        }

        assert actual_routes == expected_routes

    def test_operation_ids_are_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]
        duplicates = {op for op in operation_ids if operation_ids.count(op) > 1}

        assert all(operation_ids)
        assert not duplicates, f"Duplicate operation_ids found: {duplicates}"

    def test_all_routes_have_tags_and_resource(self):
        for entry in ROUTE_REGISTRY:
            assert entry.tags, f"{entry.method.value} {entry.path} has no tags"
            assert entry.resource, f"{entry.method.value} {entry.path} has no resource"

    def test_duplicate_routes_rejected(self):
        with pytest.raises(ValueError, match="Duplicate route"):
            register_routes_from_registry(
                APIRouter(), [ROUTE_REGISTRY[0], ROUTE_REGISTRY[0]]
            )


# =============================================================================
# Test Class 2: Auth Policy Enforcement
# =============================================================================


@pytest.mark.api
class TestAuthPolicyEnforcement:
    """Verify auth policies match what handlers ask for."""

    def test_public_routes_have_no_user_dependency(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == AuthLevel.PUBLIC:
                assert not any(
                    "CurrentUser" in annotation
                    for annotation in _annotations(entry.handler)
                ), f"PUBLIC route {entry.method.value} {entry.path} resolves a user"

    @pytest.mark.parametrize(
        "level",
        [AuthLevel.OPTIONAL, AuthLevel.AUTHENTICATED, AuthLevel.ADMIN],
    )
    def test_non_public_routes_receive_current_user(self, level):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == level:
                assert any(
                    "CurrentUser" in annotation
                    for annotation in _annotations(entry.handler)
                ), f"{level.value} route {entry.method.value} {entry.path} has no user"

    def test_public_mutations_document_rationale(self):
        for entry in ROUTE_REGISTRY:
            if (
                entry.auth_policy.level == AuthLevel.PUBLIC
                and entry.method != HTTPMethod.GET
                and entry.path not in {
                    "/auth/register",
                    "/auth/login",
                    "/auth/forgot-password",
                    "/auth/reset-password",
                }
            ):
                assert entry.auth_policy.rationale, (
                    f"PUBLIC {entry.method.value} {entry.path} needs a rationale"
                )

    def test_mutations_of_content_require_auth(self):
        for entry in ROUTE_REGISTRY:
            if entry.method in {HTTPMethod.PATCH, HTTPMethod.DELETE}:
                assert entry.auth_policy.level in {
                    AuthLevel.AUTHENTICATED,
                    AuthLevel.ADMIN,
                }, f"{entry.method.value} {entry.path} is not protected"


# =============================================================================
# Test Class 3: Metadata Consistency
# =============================================================================


@pytest.mark.api
class TestMetadataConsistency:
    def test_get_routes_are_safe(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.GET:
                assert entry.idempotency == IdempotencyLevel.SAFE, entry.path

    def test_paths_are_relative_to_version_prefix(self):
        for entry in ROUTE_REGISTRY:
            assert entry.path.startswith("/")
            assert not entry.path.startswith("/api/")

    def test_admin_routes_document_forbidden(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == AuthLevel.ADMIN:
                statuses = {error.status for error in entry.errors or []}
                assert 403 in statuses, f"{entry.method.value} {entry.path}"
