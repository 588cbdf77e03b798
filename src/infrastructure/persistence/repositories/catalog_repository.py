"""CatalogRepository - developers, publishers, genres and platforms.

All four kinds share one adapter; each kind maps to its own model class and
domain dataclass through ``_MODELS``/``_ENTITIES``.
"""

from dataclasses import asdict
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.catalog import Developer, Genre, Platform, Publisher
from src.domain.protocols.catalog_repository import CatalogEntry, CatalogKind
from src.infrastructure.persistence.base import BaseModel, ensure_utc
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.catalog import (
    Developer as DeveloperModel,
    Genre as GenreModel,
    Platform as PlatformModel,
    Publisher as PublisherModel,
)

_MODELS: dict[CatalogKind, type[BaseModel]] = {
    CatalogKind.DEVELOPER: DeveloperModel,
    CatalogKind.PUBLISHER: PublisherModel,
    CatalogKind.GENRE: GenreModel,
    CatalogKind.PLATFORM: PlatformModel,
}

_ENTITIES: dict[CatalogKind, type] = {
    CatalogKind.DEVELOPER: Developer,
    CatalogKind.PUBLISHER: Publisher,
    CatalogKind.GENRE: Genre,
    CatalogKind.PLATFORM: Platform,
}


def _to_domain(kind: CatalogKind, model: BaseModel) -> CatalogEntry:
    entity_cls = _ENTITIES[kind]
    fields = {
        name: getattr(model, name)
        for name in entity_cls.__dataclass_fields__
        if name != "created_at"
    }
    return entity_cls(**fields, created_at=ensure_utc(model.created_at))


class CatalogRepository:
    """SQLAlchemy implementation of CatalogRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_entries(self, kind: CatalogKind) -> list[CatalogEntry]:
        """All entries of ``kind`` ordered by name."""
        model_cls = _MODELS[kind]
        stmt = select(model_cls).order_by(model_cls.name)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return [_to_domain(kind, model) for model in result.scalars().all()]

    async def find_by_ids(
        self, kind: CatalogKind, entry_ids: list[UUID]
    ) -> list[CatalogEntry]:
        if not entry_ids:
            return []
        model_cls = _MODELS[kind]
        stmt = select(model_cls).where(model_cls.id.in_(entry_ids))
        result = await self.session.execute(stmt)
        return [_to_domain(kind, model) for model in result.scalars().all()]

    async def slug_exists(self, kind: CatalogKind, slug: str) -> bool:
        model_cls = _MODELS[kind]
        stmt = select(model_cls.id).where(model_cls.slug == slug)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, kind: CatalogKind, entry: CatalogEntry) -> None:
        """Persist a new catalog entry.

        Raises:
            DuplicateRecordError: If name or slug already exists.
        """
        model = _MODELS[kind](**asdict(entry))
        self.session.add(model)
        await commit_or_raise_duplicate(self.session)
