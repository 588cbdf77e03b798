"""API tests for non-versioned system routes."""

import pytest

from src.core.config import settings


@pytest.mark.api
def test_root_endpoint_returns_status_and_version(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "name": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@pytest.mark.api
def test_health_endpoint_returns_healthy_status(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.api
def test_unknown_route_is_problem_details(client) -> None:
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["title"] == "Resource Not Found"
    assert body["instance"] == "/api/v1/does-not-exist"
