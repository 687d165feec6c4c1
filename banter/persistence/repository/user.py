"""PostgreSQL implementation of User repository."""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from banter.domain.model import User
from banter.domain.repository import UserRepository
from banter.domain.value import UserId
from banter.persistence.database import store_errors
from banter.persistence.mappers import row_to_user, user_to_dict
from banter.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        with store_errors("users.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch lookup of users by ID."""
        ids = set(user_ids)
        if not ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        with store_errors("users.find_by_ids"):
            result = await self.session.execute(stmt)

        users = [row_to_user(row._asdict()) for row in result.fetchall()]
        return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        with store_errors("users.save"):
            if existing:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return user
