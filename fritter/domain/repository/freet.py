"""Freet repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fritter.domain.model.freet import Freet
from fritter.domain.value import FreetId, TagId, UserId


class FreetRepository(ABC):
    """Repository for Freet aggregate.

    Stores content and tag sets. Votes and reference links live in their
    own repositories; freets returned here carry empty vote sets and links.
    All listings are ordered by date_modified, newest first.
    """

    @abstractmethod
    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID.

        Args:
            freet_id: The freet's unique identifier

        Returns:
            The freet if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Freet]:
        """Find every freet."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[Freet]:
        """Find freets written by one author."""
        pass

    @abstractmethod
    async def find_by_authors_or_tags(
        self, author_ids: Sequence[UserId], tag_ids: Sequence[TagId]
    ) -> list[Freet]:
        """Find freets by any of the authors or carrying any of the tags.

        Args:
            author_ids: Authors to match
            tag_ids: Tags to match

        Returns:
            Matching freets without duplicates
        """
        pass

    @abstractmethod
    async def save(self, freet: Freet) -> Freet:
        """Save a freet and its tag set (create or update).

        Args:
            freet: The freet to save

        Returns:
            The saved freet
        """
        pass

    @abstractmethod
    async def delete(self, freet_id: FreetId) -> None:
        """Delete a freet.

        Args:
            freet_id: The freet ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> list[FreetId]:
        """Delete every freet of an author.

        Args:
            author_id: The author's user ID

        Returns:
            IDs of the deleted freets
        """
        pass
