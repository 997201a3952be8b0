"""PostgreSQL implementation of ReferenceLink repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import ReferenceLink
from fritter.domain.repository import ReferenceLinkRepository
from fritter.domain.value import FreetId, ReferenceLinkId, UserId
from fritter.persistence.mappers import reference_link_to_dict, row_to_reference_link
from fritter.persistence.tables import reference_links_table


class PostgresReferenceLinkRepository(ReferenceLinkRepository):
    """PostgreSQL implementation of ReferenceLinkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, link_id: ReferenceLinkId) -> Optional[ReferenceLink]:
        """Find a reference link by ID."""
        stmt = select(reference_links_table).where(reference_links_table.c.id == link_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reference_link(row._asdict()) if row else None

    async def find_by_freet(self, freet_id: FreetId) -> list[ReferenceLink]:
        """Find links on a freet in the order they were added."""
        return await self.find_by_freets([freet_id])

    async def find_by_freets(
        self, freet_ids: Sequence[FreetId]
    ) -> list[ReferenceLink]:
        """Find links on several freets (batch query)."""
        if not freet_ids:
            return []

        stmt = (
            select(reference_links_table)
            .where(reference_links_table.c.freet_id.in_(list(freet_ids)))
            .order_by(reference_links_table.c.date_created)
        )
        result = await self.session.execute(stmt)
        return [row_to_reference_link(row._asdict()) for row in result.fetchall()]

    async def save(self, link: ReferenceLink) -> ReferenceLink:
        """Save a new reference link."""
        stmt = insert(reference_links_table).values(**reference_link_to_dict(link))
        await self.session.execute(stmt)
        await self.session.flush()
        return link

    async def delete(self, link_id: ReferenceLinkId) -> None:
        """Delete a reference link."""
        stmt = delete(reference_links_table).where(reference_links_table.c.id == link_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every link on the given freets."""
        if not freet_ids:
            return
        stmt = delete(reference_links_table).where(
            reference_links_table.c.freet_id.in_(list(freet_ids))
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every link issued by a user."""
        stmt = delete(reference_links_table).where(
            reference_links_table.c.issuer_id == issuer_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
