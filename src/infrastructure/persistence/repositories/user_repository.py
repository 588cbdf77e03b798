"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.enums import UserRole
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.database import commit_or_raise_duplicate
from src.infrastructure.persistence.models.user import User as UserModel


def user_model_to_domain(user_model: UserModel) -> User:
    """Convert database model to domain entity (shared with joined queries)."""
    return User(
        id=user_model.id,
        email=user_model.email,
        username=user_model.username,
        password_hash=user_model.password_hash,
        role=UserRole(user_model.role),
        display_name=user_model.display_name,
        bio=user_model.bio,
        avatar=user_model.avatar,
        location=user_model.location,
        website=user_model.website,
        is_private=user_model.is_private,
        language=user_model.language,
        timezone=user_model.timezone,
        email_notifications=user_model.email_notifications,
        reset_token_hash=user_model.reset_token_hash,
        reset_token_expires_at=ensure_utc(user_model.reset_token_expires_at),
        created_at=ensure_utc(user_model.created_at),  # type: ignore[arg-type]
        updated_at=ensure_utc(user_model.updated_at),  # type: ignore[arg-type]
    )


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from the UserRepository protocol
    (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_username("pixel_knight")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username (case-insensitive)."""
        stmt = select(UserModel).where(
            func.lower(UserModel.username) == username.lower()
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_ids(self, user_ids: list[UUID]) -> list[User]:
        """Fetch several users at once."""
        if not user_ids:
            return []
        stmt = select(UserModel).where(UserModel.id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_users(
        self,
        *,
        search: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[User], int]:
        """List users newest first, optionally filtered by username/display name.

        Returns:
            Tuple of (page of users, total matching count).
        """
        stmt = select(UserModel)
        count_stmt = select(func.count()).select_from(UserModel)

        if search:
            pattern = f"%{search}%"
            condition = or_(
                UserModel.username.ilike(pattern),
                UserModel.display_name.ilike(pattern),
            )
            stmt = stmt.where(condition)
            count_stmt = count_stmt.where(condition)

        stmt = stmt.order_by(UserModel.created_at.desc()).offset(offset).limit(limit)

        total = (await self.session.execute(count_stmt)).scalar_one()
        result = await self.session.execute(stmt)
        users = [self._to_domain(model) for model in result.scalars().all()]
        return users, total

    async def save(self, user: User) -> None:
        """Create new user in database.

        Raises:
            DuplicateRecordError: If email or username already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await commit_or_raise_duplicate(self.session)
        await self.session.refresh(user_model)

    async def update(self, user: User) -> None:
        """Update existing user in database.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.username = user.username
        user_model.password_hash = user.password_hash
        user_model.role = user.role.value
        user_model.display_name = user.display_name
        user_model.bio = user.bio
        user_model.avatar = user.avatar
        user_model.location = user.location
        user_model.website = user.website
        user_model.is_private = user.is_private
        user_model.language = user.language
        user_model.timezone = user.timezone
        user_model.email_notifications = user.email_notifications
        user_model.reset_token_hash = user.reset_token_hash
        user_model.reset_token_expires_at = user.reset_token_expires_at
        user_model.updated_at = user.updated_at

        await self.session.commit()
        await self.session.refresh(user_model)

    async def delete(self, user_id: UUID) -> None:
        """Hard delete user; owned rows go with it via ON DELETE CASCADE."""
        await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return user_model_to_domain(user_model)

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            email=user.email,
            username=user.username,
            password_hash=user.password_hash,
            role=user.role.value,
            display_name=user.display_name,
            bio=user.bio,
            avatar=user.avatar,
            location=user.location,
            website=user.website,
            is_private=user.is_private,
            language=user.language,
            timezone=user.timezone,
            email_notifications=user.email_notifications,
            reset_token_hash=user.reset_token_hash,
            reset_token_expires_at=user.reset_token_expires_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
