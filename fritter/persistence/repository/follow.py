"""PostgreSQL implementation of Follow repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Follow, FollowTarget
from fritter.domain.repository import FollowRepository
from fritter.domain.value import FollowId, FollowTargetKind, UserId
from fritter.persistence.mappers import follow_to_dict, row_to_follow, target_to_columns
from fritter.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _target_clause(self, target: FollowTarget):
        columns = target_to_columns(target)
        return and_(
            follows_table.c.target_kind == columns["target_kind"],
            follows_table.c.target_id == columns["target_id"],
        )

    async def find_by_id(self, follow_id: FollowId) -> Optional[Follow]:
        """Find a follow by ID."""
        stmt = select(follows_table).where(follows_table.c.id == follow_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def find_by_follower_and_target(
        self, follower_id: UserId, target: FollowTarget
    ) -> Optional[Follow]:
        """Find the follower's edge to a target, if any."""
        stmt = select(follows_table).where(
            follows_table.c.follower_id == follower_id,
            self._target_clause(target),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_follow(row._asdict()) if row else None

    async def find_by_follower(self, follower_id: UserId) -> list[Follow]:
        """Find every edge leaving a user."""
        stmt = (
            select(follows_table)
            .where(follows_table.c.follower_id == follower_id)
            .order_by(follows_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def find_by_target(self, target: FollowTarget) -> list[Follow]:
        """Find every edge pointing at a target."""
        stmt = (
            select(follows_table)
            .where(self._target_clause(target))
            .order_by(follows_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_follow(row._asdict()) for row in result.fetchall()]

    async def save(self, follow: Follow) -> Follow:
        """Save a new follow."""
        stmt = insert(follows_table).values(**follow_to_dict(follow))
        # Savepoint keeps the request transaction usable after a unique violation
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return follow

    async def delete(self, follow_id: FollowId) -> None:
        """Delete a follow."""
        stmt = delete(follows_table).where(follows_table.c.id == follow_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every edge where the user is follower or followed user."""
        stmt = delete(follows_table).where(
            or_(
                follows_table.c.follower_id == user_id,
                and_(
                    follows_table.c.target_kind == FollowTargetKind.USER.value,
                    follows_table.c.target_id == user_id,
                ),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
