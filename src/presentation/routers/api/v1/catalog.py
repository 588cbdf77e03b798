"""Catalog reference resources router.

Developers, publishers, genres and platforms share one shape of endpoints,
so each pair of handlers is built from the catalog kind:

    GET  /api/v1/developers   POST /api/v1/developers   (admin)
    GET  /api/v1/publishers   POST /api/v1/publishers   (admin)
    GET  /api/v1/genres       POST /api/v1/genres       (admin)
    GET  /api/v1/platforms    POST /api/v1/platforms    (admin)

Lists are ordered by name. Creating an entry whose derived slug already
exists returns 409.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Depends, Request
from pydantic import BaseModel

from src.application.commands.game_commands import CreateCatalogEntry
from src.application.commands.handlers.game_handlers import (
    CatalogError,
    CreateCatalogEntryHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.game_queries import ListCatalogEntries
from src.application.queries.handlers.game_handlers import ListCatalogEntriesHandler
from src.core.container import (
    get_create_catalog_entry_handler,
    get_list_catalog_entries_handler,
)
from src.core.result import Failure
from src.domain.protocols import CatalogKind
from src.presentation.routers.api.middleware.auth_dependencies import AdminUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.game_schemas import (
    DeveloperCreateRequest,
    DeveloperResponse,
    GenreCreateRequest,
    GenreResponse,
    PlatformCreateRequest,
    PlatformResponse,
    PublisherCreateRequest,
    PublisherResponse,
)

_CATALOG_ERROR_CODES: dict[str, ApplicationErrorCode] = {
    CatalogError.NAME_CONFLICT: ApplicationErrorCode.CONFLICT,
}
_CATALOG_ERROR_FIELDS: dict[str, str] = {CatalogError.NAME_CONFLICT: "name"}


def _list_endpoint(
    kind: CatalogKind, response_model: type[BaseModel]
) -> Callable[..., Awaitable[list[Any]]]:
    async def list_entries(
        handler: ListCatalogEntriesHandler = Depends(get_list_catalog_entries_handler),
    ) -> list[Any]:
        result = await handler.handle(ListCatalogEntries(kind=kind))
        return [response_model.model_validate(entry) for entry in result.value]  # type: ignore[union-attr]

    list_entries.__name__ = f"list_{kind.value}s"
    list_entries.__doc__ = f"GET /api/v1/{kind.value}s → 200 OK"
    return list_entries


def _create_endpoint(
    kind: CatalogKind,
    request_model: type[BaseModel],
    response_model: type[BaseModel],
) -> Callable[..., Awaitable[Any]]:
    async def create_entry(
        request: Request,
        current_user: AdminUser,
        data: request_model,  # type: ignore[valid-type]
        handler: CreateCatalogEntryHandler = Depends(get_create_catalog_entry_handler),
    ) -> Any:
        payload = data.model_dump()
        name = payload.pop("name")
        result = await handler.handle(
            CreateCatalogEntry(kind=kind, name=name, attributes=payload)
        )

        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_handler_error(
                result.error, request, _CATALOG_ERROR_CODES, _CATALOG_ERROR_FIELDS
            )

        return response_model.model_validate(result.value)

    create_entry.__name__ = f"create_{kind.value}"
    create_entry.__doc__ = f"POST /api/v1/{kind.value}s → 201 Created (admin only)"
    return create_entry


list_developers = _list_endpoint(CatalogKind.DEVELOPER, DeveloperResponse)
create_developer = _create_endpoint(
    CatalogKind.DEVELOPER, DeveloperCreateRequest, DeveloperResponse
)

list_publishers = _list_endpoint(CatalogKind.PUBLISHER, PublisherResponse)
create_publisher = _create_endpoint(
    CatalogKind.PUBLISHER, PublisherCreateRequest, PublisherResponse
)

list_genres = _list_endpoint(CatalogKind.GENRE, GenreResponse)
create_genre = _create_endpoint(CatalogKind.GENRE, GenreCreateRequest, GenreResponse)

list_platforms = _list_endpoint(CatalogKind.PLATFORM, PlatformResponse)
create_platform = _create_endpoint(
    CatalogKind.PLATFORM, PlatformCreateRequest, PlatformResponse
)

__all__ = [
    "create_developer",
    "create_genre",
    "create_platform",
    "create_publisher",
    "list_developers",
    "list_genres",
    "list_platforms",
    "list_publishers",
]
