"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional, Sequence

from fritter.domain.model.tag import Tag
from fritter.domain.repository.tag import TagRepository
from fritter.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return deepcopy(tag) if tag else None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [deepcopy(self._tags[tid]) for tid in tag_ids if tid in self._tags]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        tag_id = self._name_index.get(name.root)
        if tag_id:
            tag = self._tags.get(tag_id)
            return deepcopy(tag) if tag else None
        return None

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        tags = []
        for name in names:
            tag = await self.find_by_name(name)
            if tag:
                tags.append(tag)
        return tags

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = sorted(self._tags.values(), key=lambda t: t.name.root)
        return [deepcopy(tag) for tag in tags]

    async def get_or_create(self, tag: Tag) -> Tag:
        """Store the tag unless its name is taken, then return the stored tag."""
        if tag.name.root not in self._name_index:
            self._tags[tag.id] = deepcopy(tag)
            self._name_index[tag.name.root] = tag.id
        return deepcopy(self._tags[self._name_index[tag.name.root]])

    def count(self) -> int:
        """Number of stored tags."""
        return len(self._tags)
