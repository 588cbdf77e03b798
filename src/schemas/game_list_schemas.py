"""Game list schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.game_list import GameList, GameListEntry
from src.schemas.common_schemas import reject_null


class GameListCreateRequest(BaseModel):
    """POST /api/v1/game-lists"""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    is_public: bool = True


class GameListUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    is_public: bool | None = None

    @field_validator("name", "is_public")
    @classmethod
    def reject_null_values(cls, v):
        return reject_null(v)


class GameListEntryCreateRequest(BaseModel):
    """POST /api/v1/game-lists/{id}/entries

    Without ``order`` the entry is appended after the current last entry.
    """

    game_id: UUID
    notes: str | None = Field(None, max_length=500)
    order: int | None = Field(None, ge=0)


class GameListEntryResponse(BaseModel):
    id: UUID
    game_id: UUID
    order: int
    notes: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: GameListEntry) -> "GameListEntryResponse":
        return cls(
            id=entry.id,
            game_id=entry.game_id,
            order=entry.order,
            notes=entry.notes,
            created_at=entry.created_at,
        )


class GameListResponse(BaseModel):
    """Game list with its entries ordered by ``order``."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None = None
    is_public: bool
    entries_count: int
    entries: list[GameListEntryResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, game_list: GameList, *, include_entries: bool = True
    ) -> "GameListResponse":
        entries = sorted(game_list.entries, key=lambda e: e.order)
        return cls(
            id=game_list.id,
            user_id=game_list.user_id,
            name=game_list.name,
            description=game_list.description,
            is_public=game_list.is_public,
            entries_count=len(entries),
            entries=(
                [GameListEntryResponse.from_entity(e) for e in entries]
                if include_entries
                else []
            ),
            created_at=game_list.created_at,
            updated_at=game_list.updated_at,
        )
