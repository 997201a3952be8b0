"""Reference link repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fritter.domain.model.reference_link import ReferenceLink
from fritter.domain.value import FreetId, ReferenceLinkId, UserId


class ReferenceLinkRepository(ABC):
    """Repository for reference links attached to freets."""

    @abstractmethod
    async def find_by_id(self, link_id: ReferenceLinkId) -> Optional[ReferenceLink]:
        """Find a reference link by ID."""
        pass

    @abstractmethod
    async def find_by_freet(self, freet_id: FreetId) -> list[ReferenceLink]:
        """Find links on a freet in the order they were added."""
        pass

    @abstractmethod
    async def find_by_freets(
        self, freet_ids: Sequence[FreetId]
    ) -> list[ReferenceLink]:
        """Find links on several freets (batch query)."""
        pass

    @abstractmethod
    async def save(self, link: ReferenceLink) -> ReferenceLink:
        """Save a new reference link."""
        pass

    @abstractmethod
    async def delete(self, link_id: ReferenceLinkId) -> None:
        """Delete a reference link."""
        pass

    @abstractmethod
    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every link on the given freets."""
        pass

    @abstractmethod
    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every link issued by a user."""
        pass
