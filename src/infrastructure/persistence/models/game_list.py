"""Game list and game list entry models."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class GameListEntry(BaseModel):
    """Game placed in a list.

    Constraints:
        - uq_game_list_entries_list_game: a game appears once per list
    """

    __tablename__ = "game_list_entries"

    list_id: Mapped[UUID] = mapped_column(
        ForeignKey("game_lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    game_id: Mapped[UUID] = mapped_column(
        ForeignKey("games.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        UniqueConstraint("list_id", "game_id", name="uq_game_list_entries_list_game"),
    )


class GameList(BaseMutableModel):
    """Curated list of games owned by a user."""

    __tablename__ = "game_lists"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    entries: Mapped[list[GameListEntry]] = relationship(
        lazy="selectin",
        order_by=GameListEntry.order,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
