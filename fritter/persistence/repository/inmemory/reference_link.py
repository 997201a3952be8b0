"""In-memory reference link repository for testing."""

from typing import Optional, Sequence

from fritter.domain.model.reference_link import ReferenceLink
from fritter.domain.repository.reference_link import ReferenceLinkRepository
from fritter.domain.value import FreetId, ReferenceLinkId, UserId


class InMemoryReferenceLinkRepository(ReferenceLinkRepository):
    """In-memory implementation of ReferenceLinkRepository for testing."""

    def __init__(self) -> None:
        self._links: list[ReferenceLink] = []

    async def find_by_id(self, link_id: ReferenceLinkId) -> Optional[ReferenceLink]:
        """Find a reference link by ID."""
        return next((link for link in self._links if link.id == link_id), None)

    async def find_by_freet(self, freet_id: FreetId) -> list[ReferenceLink]:
        """Find links on a freet in insertion order."""
        return [link for link in self._links if link.freet_id == freet_id]

    async def find_by_freets(
        self, freet_ids: Sequence[FreetId]
    ) -> list[ReferenceLink]:
        """Find links on several freets."""
        wanted = set(freet_ids)
        return [link for link in self._links if link.freet_id in wanted]

    async def save(self, link: ReferenceLink) -> ReferenceLink:
        """Save a new reference link."""
        self._links.append(link)
        return link

    async def delete(self, link_id: ReferenceLinkId) -> None:
        """Delete a reference link."""
        self._links = [link for link in self._links if link.id != link_id]

    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every link on the given freets."""
        doomed = set(freet_ids)
        self._links = [link for link in self._links if link.freet_id not in doomed]

    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every link issued by a user."""
        self._links = [link for link in self._links if link.issuer_id != issuer_id]
