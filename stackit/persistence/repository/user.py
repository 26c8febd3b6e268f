"""PostgreSQL implementation of User repository."""

from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find all users whose ID is in ``user_ids`` with a single query."""
        ids = list(set(user_ids))
        if not ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to the user's reputation, floored at 0.

        Args:
            user_id: User ID to update
            delta: Amount to add

        Returns:
            New reputation, or None if the user does not exist
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                reputation=func.greatest(0, users_table.c.reputation + delta),
                updated_at=func.now(),
            )
            .returning(users_table.c.reputation)
        )
        result = await self.session.execute(stmt)
        reputation = result.scalar_one_or_none()
        await self.session.flush()
        return reputation
