"""In-memory freet repository for testing."""

from copy import deepcopy
from typing import Optional, Sequence

from fritter.domain.model.freet import Freet
from fritter.domain.repository.freet import FreetRepository
from fritter.domain.value import FreetId, TagId, UserId


class InMemoryFreetRepository(FreetRepository):
    """In-memory implementation of FreetRepository for testing."""

    def __init__(self) -> None:
        self._freets: dict[FreetId, Freet] = {}

    def _sorted(self, freets) -> list[Freet]:
        ordered = sorted(freets, key=lambda f: f.date_modified, reverse=True)
        return [deepcopy(freet) for freet in ordered]

    async def find_by_id(self, freet_id: FreetId) -> Optional[Freet]:
        """Find a freet by ID."""
        freet = self._freets.get(freet_id)
        return deepcopy(freet) if freet else None

    async def find_all(self) -> list[Freet]:
        """Find every freet."""
        return self._sorted(self._freets.values())

    async def find_by_author(self, author_id: UserId) -> list[Freet]:
        """Find freets by one author."""
        return self._sorted(f for f in self._freets.values() if f.author_id == author_id)

    async def find_by_authors_or_tags(
        self, author_ids: Sequence[UserId], tag_ids: Sequence[TagId]
    ) -> list[Freet]:
        """Find freets matching any author or any tag."""
        authors = set(author_ids)
        tags = set(tag_ids)
        return self._sorted(
            f
            for f in self._freets.values()
            if f.author_id in authors or f.tag_ids & tags
        )

    async def save(self, freet: Freet) -> Freet:
        """Save a freet without its votes and links."""
        self._freets[freet.id] = freet.model_copy(
            update={"upvotes": frozenset(), "downvotes": frozenset(), "links": []}
        )
        return freet

    async def delete(self, freet_id: FreetId) -> None:
        """Delete a freet."""
        self._freets.pop(freet_id, None)

    async def delete_by_author(self, author_id: UserId) -> list[FreetId]:
        """Delete every freet of an author."""
        deleted = [fid for fid, f in self._freets.items() if f.author_id == author_id]
        for freet_id in deleted:
            del self._freets[freet_id]
        return deleted
