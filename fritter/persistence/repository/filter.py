"""PostgreSQL implementation of Filter repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fritter.domain.model import Filter
from fritter.domain.repository import FilterRepository
from fritter.domain.value import FilterId, FilterName, UserId
from fritter.persistence.mappers import filter_to_dict, row_to_filter
from fritter.persistence.tables import (
    filter_tags_table,
    filter_users_table,
    filters_table,
)


class PostgresFilterRepository(FilterRepository):
    """PostgreSQL implementation of FilterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _rows_to_filters(self, rows) -> list[Filter]:
        row_dicts = [row._asdict() for row in rows]
        filter_ids = [r["id"] for r in row_dicts]
        if not filter_ids:
            return []

        users: dict[UUID, list[UUID]] = defaultdict(list)
        result = await self.session.execute(
            select(filter_users_table).where(
                filter_users_table.c.filter_id.in_(filter_ids)
            )
        )
        for row in result.fetchall():
            users[row.filter_id].append(row.user_id)

        tags: dict[UUID, list[UUID]] = defaultdict(list)
        result = await self.session.execute(
            select(filter_tags_table).where(filter_tags_table.c.filter_id.in_(filter_ids))
        )
        for row in result.fetchall():
            tags[row.filter_id].append(row.tag_id)

        return [
            row_to_filter(r, user_ids=users[r["id"]], tag_ids=tags[r["id"]])
            for r in row_dicts
        ]

    async def find_by_id(self, filter_id: FilterId) -> Optional[Filter]:
        """Find a filter by ID."""
        stmt = select(filters_table).where(filters_table.c.id == filter_id)
        result = await self.session.execute(stmt)
        filters = await self._rows_to_filters(result.fetchall())
        return filters[0] if filters else None

    async def find_by_owner(self, owner_id: UserId) -> list[Filter]:
        """Find all filters owned by a user, ordered by name."""
        stmt = (
            select(filters_table)
            .where(filters_table.c.owner_id == owner_id)
            .order_by(filters_table.c.name)
        )
        result = await self.session.execute(stmt)
        return await self._rows_to_filters(result.fetchall())

    async def find_by_owner_and_name(
        self, owner_id: UserId, name: FilterName
    ) -> Optional[Filter]:
        """Find one of the owner's filters by its name."""
        stmt = select(filters_table).where(
            filters_table.c.owner_id == owner_id,
            filters_table.c.name == name.root,
        )
        result = await self.session.execute(stmt)
        filters = await self._rows_to_filters(result.fetchall())
        return filters[0] if filters else None

    async def save(self, filter_: Filter) -> Filter:
        """Save a filter and replace its usernames and tags."""
        filter_dict = filter_to_dict(filter_)
        exists = await self.session.scalar(
            select(filters_table.c.id).where(filters_table.c.id == filter_.id)
        )

        # Savepoint keeps the request transaction usable after a unique violation
        async with self.session.begin_nested():
            if exists:
                await self.session.execute(
                    update(filters_table)
                    .where(filters_table.c.id == filter_.id)
                    .values(**filter_dict)
                )
                await self.session.execute(
                    delete(filter_users_table).where(
                        filter_users_table.c.filter_id == filter_.id
                    )
                )
                await self.session.execute(
                    delete(filter_tags_table).where(
                        filter_tags_table.c.filter_id == filter_.id
                    )
                )
            else:
                await self.session.execute(insert(filters_table).values(**filter_dict))

            if filter_.user_ids:
                await self.session.execute(
                    insert(filter_users_table),
                    [
                        {"filter_id": filter_.id, "user_id": user_id}
                        for user_id in filter_.user_ids
                    ],
                )
            if filter_.tag_ids:
                await self.session.execute(
                    insert(filter_tags_table),
                    [
                        {"filter_id": filter_.id, "tag_id": tag_id}
                        for tag_id in filter_.tag_ids
                    ],
                )

        await self.session.flush()
        return filter_

    async def delete(self, filter_id: FilterId) -> None:
        """Delete a filter (junction rows cascade)."""
        stmt = delete(filters_table).where(filters_table.c.id == filter_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_owner(self, owner_id: UserId) -> None:
        """Delete every filter owned by a user."""
        stmt = delete(filters_table).where(filters_table.c.owner_id == owner_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_user_everywhere(self, user_id: UserId) -> None:
        """Drop a user from the username set of every filter."""
        stmt = delete(filter_users_table).where(filter_users_table.c.user_id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
