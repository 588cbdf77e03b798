"""Game catalog schemas.

Covers games and the four catalog reference resources (developers,
publishers, genres, platforms). Response models read straight from the
domain dataclasses via ``from_attributes``.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.dtos.game_dtos import GameDetail
from src.domain.enums import GameStatus
from src.domain.types import WebsiteUrl
from src.schemas.common_schemas import reject_null
from src.schemas.review_schemas import GAME_PREVIEW_LENGTH, ReviewPreviewResponse


# =============================================================================
# Catalog entries
# =============================================================================


class DeveloperCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    website: WebsiteUrl | None = None
    logo: str | None = Field(None, max_length=255)
    country: str | None = Field(None, max_length=100)
    founded_year: int | None = Field(None, ge=1800, le=2100)


class PublisherCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    website: WebsiteUrl | None = None
    logo: str | None = Field(None, max_length=255)


class GenreCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: str | None = None


class PlatformCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    abbreviation: str | None = Field(None, max_length=20)


class DeveloperResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    website: str | None = None
    logo: str | None = None
    country: str | None = None
    founded_year: int | None = None
    created_at: datetime


class PublisherResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    website: str | None = None
    logo: str | None = None
    created_at: datetime


class GenreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    created_at: datetime


class PlatformResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    abbreviation: str | None = None
    created_at: datetime


# =============================================================================
# Games
# =============================================================================


class GameCreateRequest(BaseModel):
    """POST /api/v1/games (admin). The slug is derived from the title."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    summary: str | None = Field(None, max_length=500)
    release_date: date | None = None
    status: GameStatus = GameStatus.RELEASED
    cover_image: str | None = Field(None, max_length=255)
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    genre_ids: list[UUID] = Field(default_factory=list)
    platform_ids: list[UUID] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hollow Knight",
                "summary": "A challenging 2D action-adventure.",
                "release_date": "2017-02-24",
                "status": "released",
                "genre_ids": [],
                "platform_ids": [],
            }
        }
    )


class GameUpdateRequest(BaseModel):
    """PATCH /api/v1/games/{game_id} (admin). Only the fields sent are changed."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    summary: str | None = Field(None, max_length=500)
    release_date: date | None = None
    status: GameStatus | None = None
    cover_image: str | None = Field(None, max_length=255)
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    genre_ids: list[UUID] | None = None
    platform_ids: list[UUID] | None = None

    @field_validator("title", "status")
    @classmethod
    def reject_null_values(cls, v):
        return reject_null(v)


class GameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    description: str | None = None
    summary: str | None = None
    release_date: date | None = None
    status: GameStatus
    cover_image: str | None = None
    developer_id: UUID | None = None
    publisher_id: UUID | None = None
    genre_ids: list[UUID] = Field(default_factory=list)
    platform_ids: list[UUID] = Field(default_factory=list)
    average_rating: float
    review_count: int
    created_at: datetime
    updated_at: datetime


class GameDetailResponse(GameResponse):
    """Game page: resolved catalog references plus latest review previews."""

    developer: DeveloperResponse | None = None
    publisher: PublisherResponse | None = None
    genres: list[GenreResponse] = Field(default_factory=list)
    platforms: list[PlatformResponse] = Field(default_factory=list)
    recent_reviews: list[ReviewPreviewResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, detail: GameDetail) -> "GameDetailResponse":
        base = GameResponse.model_validate(detail.game).model_dump()
        return cls(
            **base,
            developer=(
                DeveloperResponse.model_validate(detail.developer)
                if detail.developer
                else None
            ),
            publisher=(
                PublisherResponse.model_validate(detail.publisher)
                if detail.publisher
                else None
            ),
            genres=[GenreResponse.model_validate(g) for g in detail.genres],
            platforms=[PlatformResponse.model_validate(p) for p in detail.platforms],
            recent_reviews=[
                ReviewPreviewResponse.from_view(view, GAME_PREVIEW_LENGTH)
                for view in detail.recent_reviews
            ],
        )
