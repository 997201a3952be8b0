"""Tag domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from fritter.domain.model.tag import Tag
from fritter.domain.repository import TagRepository
from fritter.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for the tag registry."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def find_or_create(self, name: TagName) -> Tag:
        """Get the tag with this name, creating it on first use.

        Args:
            name: Tag name

        Returns:
            The stored tag
        """
        tags = await self.find_or_create_many([name])
        return tags[0]

    async def find_or_create_many(self, names: Sequence[TagName]) -> list[Tag]:
        """Resolve tag names to tags, creating the missing ones.

        Order is preserved and duplicates resolve to the same tag, so the
        result has one entry per input name.

        Args:
            names: Tag names

        Returns:
            Tags in input order
        """
        with logfire.span(
            "tag_service.find_or_create_many", tags=[n.root for n in names]
        ):
            if not names:
                return []

            unique = list(dict.fromkeys(name.root for name in names))
            found = await self.tag_repository.find_by_names([TagName(n) for n in unique])
            by_name = {tag.name.root: tag for tag in found}

            created = 0
            for name in unique:
                if name not in by_name:
                    candidate = Tag(
                        id=TagId(uuid4()), name=TagName(name), created_at=datetime.now()
                    )
                    by_name[name] = await self.tag_repository.get_or_create(candidate)
                    created += 1

            if created:
                logfire.info("Tags created", count=created)
            return [by_name[name.root] for name in names]

    async def get_tags_by_ids(self, tag_ids: Sequence[TagId]) -> dict[TagId, Tag]:
        """Batch lookup of tags keyed by ID."""
        if not tag_ids:
            return {}
        tags = await self.tag_repository.find_by_ids(list(set(tag_ids)))
        return {tag.id: tag for tag in tags}

    async def get_tag_by_name(self, name: TagName) -> Tag | None:
        """Get a tag by name."""
        return await self.tag_repository.find_by_name(name)

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags sorted by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags
