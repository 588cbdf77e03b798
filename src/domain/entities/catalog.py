"""Catalog reference entities: studios and taxonomies.

Developers, publishers, genres and platforms are simple named records with
a unique slug. Games reference them by id.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Developer:
    """Game development studio."""

    id: UUID
    name: str
    slug: str
    description: str | None = None
    website: str | None = None
    logo: str | None = None
    country: str | None = None
    founded_year: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class Publisher:
    """Game publisher."""

    id: UUID
    name: str
    slug: str
    description: str | None = None
    website: str | None = None
    logo: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class Genre:
    """Game genre (RPG, Platformer...)."""

    id: UUID
    name: str
    slug: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class Platform:
    """Gaming platform (PC, PlayStation 5...)."""

    id: UUID
    name: str
    slug: str
    abbreviation: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
