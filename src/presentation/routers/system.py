"""System router for non-versioned application endpoints.

Provides the root status and health endpoints, which are not part of the
versioned API contract. Both are side-effect free so load balancers and
uptime checks can call them freely.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: API name, status and version.
    """
    return {
        "name": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Probes the database with ``SELECT 1``.

    Returns:
        JSONResponse: 200 ``{"status": "healthy"}`` or
            503 ``{"status": "unhealthy"}`` when the database is unreachable.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy"},
    )
