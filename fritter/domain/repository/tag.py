"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fritter.domain.model.tag import Tag
from fritter.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        pass

    @abstractmethod
    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: Tag names

        Returns:
            Found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        pass

    @abstractmethod
    async def get_or_create(self, tag: Tag) -> Tag:
        """Persist a tag unless one with the same name exists.

        Args:
            tag: Candidate tag

        Returns:
            The stored tag with this name, which is the candidate only if
            no tag with the name existed before
        """
        pass
