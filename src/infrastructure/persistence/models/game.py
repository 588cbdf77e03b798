"""Game model and its genre/platform association tables."""

from datetime import date
from uuid import UUID

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel
from src.infrastructure.persistence.models.catalog import Genre, Platform

game_genres = Table(
    "game_genres",
    BaseModel.metadata,
    Column("game_id", Uuid, ForeignKey("games.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Uuid, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)

game_platforms = Table(
    "game_platforms",
    BaseModel.metadata,
    Column("game_id", Uuid, ForeignKey("games.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "platform_id", Uuid, ForeignKey("platforms.id", ondelete="CASCADE"), primary_key=True
    ),
)


class Game(BaseMutableModel):
    """Game in the catalog.

    ``average_rating`` and ``review_count`` are denormalized aggregates of
    published reviews, recomputed by the repository after review changes.
    """

    __tablename__ = "games"

    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(
        String(220),
        nullable=False,
        unique=True,
        index=True,
        comment="URL-safe identifier derived from title (unique)",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    summary: Mapped[str | None] = mapped_column(String(500), nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="released",
        index=True,
    )
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    developer_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("developers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    publisher_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("publishers.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    average_rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        comment="Mean rating of published reviews (0 when none)",
    )
    review_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Number of published reviews",
    )

    genres: Mapped[list[Genre]] = relationship(
        secondary=game_genres,
        lazy="selectin",
        order_by=Genre.name,
    )
    platforms: Mapped[list[Platform]] = relationship(
        secondary=game_platforms,
        lazy="selectin",
        order_by=Platform.name,
    )

    def __repr__(self) -> str:
        return f"<Game(id={self.id}, slug={self.slug!r})>"
