"""CatalogRepository protocol for developers, publishers, genres, platforms."""

from enum import Enum
from typing import Protocol, TypeAlias
from uuid import UUID

from src.domain.entities.catalog import Developer, Genre, Platform, Publisher

CatalogEntry: TypeAlias = Developer | Publisher | Genre | Platform


class CatalogKind(str, Enum):
    """Kinds of catalog reference entries."""

    DEVELOPER = "developer"
    PUBLISHER = "publisher"
    GENRE = "genre"
    PLATFORM = "platform"


class CatalogRepository(Protocol):
    """Catalog repository protocol (port)."""

    async def list_entries(self, kind: CatalogKind) -> list[CatalogEntry]:
        """All entries of ``kind`` ordered by name."""
        ...

    async def find_by_ids(
        self, kind: CatalogKind, entry_ids: list[UUID]
    ) -> list[CatalogEntry]:
        ...

    async def slug_exists(self, kind: CatalogKind, slug: str) -> bool:
        ...

    async def save(self, kind: CatalogKind, entry: CatalogEntry) -> None:
        ...
