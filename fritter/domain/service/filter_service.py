"""Filter domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from fritter.domain.error import ConflictError
from fritter.domain.model.filter import Filter
from fritter.domain.repository import FilterRepository
from fritter.domain.value import FilterId, FilterName, TagId, UserId

from .base import Service

NAME_IN_USE = "This filter name is already in use."


class FilterService(Service):
    """Domain service for saved filters."""

    def __init__(self, filter_repository: FilterRepository) -> None:
        """Initialize filter service.

        Args:
            filter_repository: Filter repository
        """
        self.filter_repository = filter_repository

    async def create_filter(
        self,
        owner_id: UserId,
        name: FilterName,
        user_ids: Sequence[UserId],
        tag_ids: Sequence[TagId],
    ) -> Filter:
        """Save a new filter.

        Raises:
            ConflictError: If the owner already has a filter with this name
        """
        with logfire.span(
            "filter_service.create_filter", owner_id=str(owner_id), name=name.root
        ):
            await self.ensure_name_available(owner_id, name)

            now = datetime.now()
            filter_ = Filter(
                id=FilterId(uuid4()),
                owner_id=owner_id,
                name=name,
                user_ids=frozenset(user_ids),
                tag_ids=frozenset(tag_ids),
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.filter_repository.save(filter_)
            except IntegrityError:
                raise ConflictError(NAME_IN_USE)

            logfire.info("Filter created", filter_id=str(saved.id))
            return saved

    async def ensure_name_available(
        self, owner_id: UserId, name: FilterName, current: Filter | None = None
    ) -> None:
        """Check that no other filter of the owner uses the name.

        Args:
            owner_id: Filter owner
            name: Name to check
            current: Filter being renamed, which may keep its own name

        Raises:
            ConflictError: If another filter of the owner has the name
        """
        existing = await self.filter_repository.find_by_owner_and_name(owner_id, name)
        if existing and (current is None or existing.id != current.id):
            logfire.info("Filter name in use", owner_id=str(owner_id), name=name.root)
            raise ConflictError(NAME_IN_USE)

    async def update_filter(
        self,
        filter_: Filter,
        name: FilterName,
        user_ids: Sequence[UserId],
        tag_ids: Sequence[TagId],
    ) -> Filter:
        """Replace the name, usernames and tags of a filter.

        Raises:
            ConflictError: If another filter of the owner has the new name
        """
        with logfire.span("filter_service.update_filter", filter_id=str(filter_.id)):
            await self.ensure_name_available(filter_.owner_id, name, current=filter_)

            updated = filter_.model_copy(
                update={
                    "name": name,
                    "user_ids": frozenset(user_ids),
                    "tag_ids": frozenset(tag_ids),
                    "updated_at": datetime.now(),
                }
            )
            try:
                saved = await self.filter_repository.save(updated)
            except IntegrityError:
                raise ConflictError(NAME_IN_USE)

            logfire.info("Filter updated", filter_id=str(saved.id))
            return saved

    async def get_filter(self, filter_id: FilterId) -> Filter | None:
        """Get a filter by ID."""
        filter_ = await self.filter_repository.find_by_id(filter_id)
        if not filter_:
            logfire.warn("Filter not found", filter_id=str(filter_id))
        return filter_

    async def get_filter_by_name(
        self, owner_id: UserId, name: FilterName
    ) -> Filter | None:
        """Get one of the owner's filters by name."""
        return await self.filter_repository.find_by_owner_and_name(owner_id, name)

    async def list_filters(self, owner_id: UserId) -> list[Filter]:
        """All filters of an owner, ordered by name."""
        return await self.filter_repository.find_by_owner(owner_id)

    async def delete_filter(self, filter_id: FilterId) -> None:
        """Delete a filter."""
        with logfire.span("filter_service.delete_filter", filter_id=str(filter_id)):
            await self.filter_repository.delete(filter_id)
            logfire.info("Filter deleted", filter_id=str(filter_id))

    async def purge_user(self, user_id: UserId) -> None:
        """Delete a user's filters and drop them from everyone else's."""
        with logfire.span("filter_service.purge_user", user_id=str(user_id)):
            await self.filter_repository.delete_by_owner(user_id)
            await self.filter_repository.remove_user_everywhere(user_id)
