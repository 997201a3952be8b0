"""PostgreSQL implementation of Freet repository."""

from collections import defaultdict
from typing import Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.value import FreetId, TagId, UserId
from fritter.persistence.mappers import freet_to_dict, row_to_freet
from fritter.persistence.tables import freet_tags_table, freets_table


class PostgresFreetRepository(FreetRepository):
    """PostgreSQL implementation of FreetRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_freets(
        self, freet_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch tag IDs for multiple freets in a single query.

        Args:
            freet_ids: List of freet IDs

        Returns:
            Dict mapping freet_id -> list of tag IDs
        """
        if not freet_ids:
            return {}

        stmt = select(freet_tags_table.c.freet_id, freet_tags_table.c.tag_id).where(
            freet_tags_table.c.freet_id.in_(freet_ids)
        )
        result = await self.session.execute(stmt)

        freet_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            freet_tag_map[row.freet_id].append(row.tag_id)

        return freet_tag_map

    async def _rows_to_freets(self, rows) -> list[Freet]:
        row_dicts = [row._asdict() for row in rows]
        tag_map = await self._fetch_tags_for_freets([r["id"] for r in row_dicts])
        return [row_to_freet(r, tag_ids=tag_map.get(r["id"], [])) for r in row_dicts]

    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID."""
        stmt = select(freets_table).where(freets_table.c.id == freet_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        return (await self._rows_to_freets([row]))[0]

    async def find_all(self) -> list[Freet]:
        """Find every freet, newest modification first."""
        stmt = select(freets_table).order_by(desc(freets_table.c.date_modified))
        result = await self.session.execute(stmt)
        return await self._rows_to_freets(result.fetchall())

    async def find_by_author(self, author_id: UserId) -> list[Freet]:
        """Find freets of one author, newest modification first."""
        stmt = (
            select(freets_table)
            .where(freets_table.c.author_id == author_id)
            .order_by(desc(freets_table.c.date_modified))
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_freets(result.fetchall())

    async def find_by_authors_or_tags(
        self, author_ids: Sequence[UserId], tag_ids: Sequence[TagId]
    ) -> list[Freet]:
        """Find freets matching any author or any tag, without duplicates."""
        with logfire.span(
            "freet_repository.find_by_authors_or_tags",
            authors=len(author_ids),
            tags=len(tag_ids),
        ):
            conditions = []
            if author_ids:
                conditions.append(freets_table.c.author_id.in_(list(author_ids)))
            if tag_ids:
                tagged = select(freet_tags_table.c.freet_id).where(
                    freet_tags_table.c.tag_id.in_(list(tag_ids))
                )
                conditions.append(freets_table.c.id.in_(tagged))
            if not conditions:
                return []

            # IN-subquery instead of a join keeps each freet once
            stmt = (
                select(freets_table)
                .where(or_(*conditions))
                .order_by(desc(freets_table.c.date_modified))
            )
            result = await self.session.execute(stmt)
            return await self._rows_to_freets(result.fetchall())

    async def save(self, freet: Freet) -> Freet:
        """Save a freet and replace its tag set."""
        with logfire.span("freet_repository.save", freet_id=str(freet.id)):
            freet_dict = freet_to_dict(freet)
            exists = await self.session.scalar(
                select(freets_table.c.id).where(freets_table.c.id == freet.id)
            )

            if exists:
                stmt = (
                    update(freets_table)
                    .where(freets_table.c.id == freet.id)
                    .values(**freet_dict)
                )
                await self.session.execute(stmt)
                await self.session.execute(
                    delete(freet_tags_table).where(
                        freet_tags_table.c.freet_id == freet.id
                    )
                )
            else:
                await self.session.execute(insert(freets_table).values(**freet_dict))

            if freet.tag_ids:
                await self.session.execute(
                    insert(freet_tags_table),
                    [{"freet_id": freet.id, "tag_id": tag_id} for tag_id in freet.tag_ids],
                )

            await self.session.flush()
            return freet

    async def delete(self, freet_id: FreetId) -> None:
        """Delete a freet (junction rows cascade)."""
        stmt = delete(freets_table).where(freets_table.c.id == freet_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_author(self, author_id: UserId) -> list[FreetId]:
        """Delete every freet of an author."""
        stmt = (
            delete(freets_table)
            .where(freets_table.c.author_id == author_id)
            .returning(freets_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [FreetId(row.id) for row in result.fetchall()]
