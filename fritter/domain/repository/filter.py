"""Filter repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fritter.domain.model.filter import Filter
from fritter.domain.value import FilterId, FilterName, UserId


class FilterRepository(ABC):
    """Repository for saved filters."""

    @abstractmethod
    async def find_by_id(self, filter_id: FilterId) -> Optional[Filter]:
        """Find a filter by ID."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> list[Filter]:
        """Find all filters owned by a user, ordered by name."""
        pass

    @abstractmethod
    async def find_by_owner_and_name(
        self, owner_id: UserId, name: FilterName
    ) -> Optional[Filter]:
        """Find one of the owner's filters by its name."""
        pass

    @abstractmethod
    async def save(self, filter_: Filter) -> Filter:
        """Save a filter with its usernames and tags (create or update).

        Raises:
            IntegrityError: If the owner has another filter with the name
        """
        pass

    @abstractmethod
    async def delete(self, filter_id: FilterId) -> None:
        """Delete a filter."""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner_id: UserId) -> None:
        """Delete every filter owned by a user."""
        pass

    @abstractmethod
    async def remove_user_everywhere(self, user_id: UserId) -> None:
        """Drop a user from the username set of every filter."""
        pass
