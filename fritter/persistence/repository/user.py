"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import User
from fritter.domain.repository import UserRepository
from fritter.domain.value import UserId, Username
from fritter.persistence.mappers import row_to_user, user_to_dict
from fritter.persistence.tables import users_table


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
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users by ID in a single query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.casefold()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_usernames(self, usernames: Sequence[Username]) -> list[User]:
        """Find multiple users by username, ignoring case."""
        if not usernames:
            return []

        stmt = select(users_table).where(
            func.lower(users_table.c.username).in_(
                [username.casefold() for username in usernames]
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        # Savepoint keeps the request transaction usable after a unique violation
        async with self.session.begin_nested():
            if existing:
                stmt = (
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = insert(users_table).values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
