"""In-memory filter repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from fritter.domain.model.filter import Filter
from fritter.domain.repository.filter import FilterRepository
from fritter.domain.value import FilterId, FilterName, UserId


class InMemoryFilterRepository(FilterRepository):
    """In-memory implementation of FilterRepository for testing."""

    def __init__(self) -> None:
        self._filters: dict[FilterId, Filter] = {}

    async def find_by_id(self, filter_id: FilterId) -> Optional[Filter]:
        """Find a filter by ID."""
        return self._filters.get(filter_id)

    async def find_by_owner(self, owner_id: UserId) -> list[Filter]:
        """Find all filters owned by a user, ordered by name."""
        return sorted(
            (f for f in self._filters.values() if f.owner_id == owner_id),
            key=lambda f: f.name.root,
        )

    async def find_by_owner_and_name(
        self, owner_id: UserId, name: FilterName
    ) -> Optional[Filter]:
        """Find one of the owner's filters by name."""
        return next(
            (
                f
                for f in self._filters.values()
                if f.owner_id == owner_id and f.name.root == name.root
            ),
            None,
        )

    async def save(self, filter_: Filter) -> Filter:
        """Save a filter.

        Raises:
            IntegrityError: If the owner has another filter with the name
        """
        existing = await self.find_by_owner_and_name(filter_.owner_id, filter_.name)
        if existing and existing.id != filter_.id:
            raise IntegrityError("Duplicate filter name", None, Exception())

        self._filters[filter_.id] = filter_
        return filter_

    async def delete(self, filter_id: FilterId) -> None:
        """Delete a filter."""
        self._filters.pop(filter_id, None)

    async def delete_by_owner(self, owner_id: UserId) -> None:
        """Delete every filter owned by a user."""
        self._filters = {
            fid: f for fid, f in self._filters.items() if f.owner_id != owner_id
        }

    async def remove_user_everywhere(self, user_id: UserId) -> None:
        """Drop a user from the username set of every filter."""
        for filter_id, filter_ in list(self._filters.items()):
            if user_id in filter_.user_ids:
                self._filters[filter_id] = filter_.model_copy(
                    update={"user_ids": filter_.user_ids - {user_id}}
                )
