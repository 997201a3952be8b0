"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model.tag import Tag
from fritter.domain.repository.tag import TagRepository
from fritter.domain.value import TagId, TagName
from fritter.persistence.mappers import row_to_tag, tag_to_dict
from fritter.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(list(tag_ids)))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def get_or_create(self, tag: Tag) -> Tag:
        """Insert the tag unless its name exists, then return the stored row.

        Concurrent creators of the same name converge on one row.
        """
        stmt = (
            insert(tags_table)
            .values(**tag_to_dict(tag))
            .on_conflict_do_nothing(index_elements=[tags_table.c.name])
        )
        await self.session.execute(stmt)
        await self.session.flush()

        stored = await self.find_by_name(tag.name)
        return stored if stored else tag
