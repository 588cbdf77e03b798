"""API v1 routers.

RESTful resource-based endpoints. Every route is generated at import time
from the Route Metadata Registry (ROUTE_REGISTRY), the single source of
truth for paths, auth policies and documented errors.
See src/presentation/routers/api/v1/routes/registry.py for the route catalog.

Resources:
    /api/v1/auth            - Registration, login, tokens, password reset
    /api/v1/users           - Members, profiles, follows, admin management
    /api/v1/feed            - Activity feed
    /api/v1/games           - Game catalog
    /api/v1/developers      - Catalog references (also publishers, genres,
                              platforms)
    /api/v1/reviews         - Reviews, likes and comments
    /api/v1/comments        - Comment deletion
    /api/v1/game-lists      - Curated game lists
    /api/v1/notifications   - In-app notifications
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
