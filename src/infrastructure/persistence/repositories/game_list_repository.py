"""GameListRepository - SQLAlchemy implementation of GameListRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.game_list import GameList, GameListEntry
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.game_list import (
    GameList as GameListModel,
    GameListEntry as GameListEntryModel,
)


def _entry_to_domain(model: GameListEntryModel) -> GameListEntry:
    return GameListEntry(
        id=model.id,
        list_id=model.list_id,
        game_id=model.game_id,
        order=model.order,
        notes=model.notes,
        created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
    )


def _to_domain(model: GameListModel) -> GameList:
    return GameList(
        id=model.id,
        user_id=model.user_id,
        name=model.name,
        description=model.description,
        is_public=model.is_public,
        entries=[_entry_to_domain(entry) for entry in model.entries],
        created_at=ensure_utc(model.created_at),  # type: ignore[arg-type]
        updated_at=ensure_utc(model.updated_at),  # type: ignore[arg-type]
    )


class GameListRepository:
    """SQLAlchemy implementation of GameListRepository protocol.

    Entries are loaded eagerly (``selectin``) in ``order`` order.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, list_id: UUID) -> GameList | None:
        stmt = (
            select(GameListModel)
            .where(GameListModel.id == list_id)
            .execution_options(populate_existing=True)
        )
        model = (await self.session.execute(stmt)).scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_by_user(
        self, user_id: UUID, *, public_only: bool, limit: int | None = None
    ) -> list[GameList]:
        stmt = select(GameListModel).where(GameListModel.user_id == user_id)
        if public_only:
            stmt = stmt.where(GameListModel.is_public.is_(True))
        stmt = stmt.order_by(GameListModel.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def count_by_user(self, user_id: UUID, *, public_only: bool) -> int:
        stmt = select(func.count(GameListModel.id)).where(
            GameListModel.user_id == user_id
        )
        if public_only:
            stmt = stmt.where(GameListModel.is_public.is_(True))
        return (await self.session.execute(stmt)).scalar_one()

    async def save(self, game_list: GameList) -> None:
        model = GameListModel(
            id=game_list.id,
            user_id=game_list.user_id,
            name=game_list.name,
            description=game_list.description,
            is_public=game_list.is_public,
            created_at=game_list.created_at,
            updated_at=game_list.updated_at,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)

    async def update(self, game_list: GameList) -> None:
        """Update list metadata (entries are managed via add/remove_entry)."""
        stmt = select(GameListModel).where(GameListModel.id == game_list.id)
        model = (await self.session.execute(stmt)).scalar_one()

        model.name = game_list.name
        model.description = game_list.description
        model.is_public = game_list.is_public
        model.updated_at = game_list.updated_at

        await self.session.commit()
        await self.session.refresh(model)

    async def delete(self, list_id: UUID) -> None:
        await self.session.execute(
            delete(GameListModel).where(GameListModel.id == list_id)
        )
        await self.session.commit()

    async def add_entry(self, entry: GameListEntry) -> None:
        """Add a game to a list.

        Raises:
            DuplicateRecordError: If the game is already in the list.
        """
        self.session.add(
            GameListEntryModel(
                id=entry.id,
                list_id=entry.list_id,
                game_id=entry.game_id,
                order=entry.order,
                notes=entry.notes,
                created_at=entry.created_at,
            )
        )
        await commit_or_raise_duplicate(self.session)

    async def remove_entry(self, list_id: UUID, game_id: UUID) -> bool:
        stmt = delete(GameListEntryModel).where(
            GameListEntryModel.list_id == list_id,
            GameListEntryModel.game_id == game_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return bool(result.rowcount)
