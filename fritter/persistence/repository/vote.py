"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Vote
from fritter.domain.repository import VoteRepository
from fritter.domain.value import FreetId, UserId
from fritter.persistence.mappers import row_to_vote, vote_to_dict
from fritter.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_freet(self, freet_id: FreetId) -> list[Vote]:
        """Find all votes on a freet, oldest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.freet_id == freet_id)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_freets(self, freet_ids: Sequence[FreetId]) -> list[Vote]:
        """Find all votes on several freets (batch query)."""
        if not freet_ids:
            return []

        stmt = select(votes_table).where(votes_table.c.freet_id.in_(list(freet_ids)))
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        # Savepoint keeps the request transaction usable after a unique violation
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_freet_and_issuer(
        self, freet_id: FreetId, issuer_id: UserId
    ) -> bool:
        """Delete the issuer's vote on a freet."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.freet_id == freet_id,
                votes_table.c.issuer_id == issuer_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every vote on the given freets."""
        if not freet_ids:
            return
        stmt = delete(votes_table).where(votes_table.c.freet_id.in_(list(freet_ids)))
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every vote issued by a user."""
        stmt = delete(votes_table).where(votes_table.c.issuer_id == issuer_id)
        await self.session.execute(stmt)
        await self.session.flush()
