"""Freet domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from fritter.config import ContentSettings
from fritter.domain.error import ContentTooLongError, InvalidInputError
from fritter.domain.model.freet import Freet
from fritter.domain.repository import FreetRepository
from fritter.domain.value import FreetId, TagId, TagName, UserId

from .base import Service
from .credibility_service import CredibilityService
from .tag_service import TagService


class FreetService(Service):
    """Domain service for freet operations.

    Freets leave this service hydrated: vote sets and links are loaded
    through the credibility service in one batch per call.
    """

    def __init__(
        self,
        freet_repository: FreetRepository,
        tag_service: TagService,
        credibility_service: CredibilityService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize freet service.

        Args:
            freet_repository: Freet repository
            tag_service: Tag registry
            credibility_service: Votes and reference links
            content_settings: Content limits
        """
        self.freet_repository = freet_repository
        self.tag_service = tag_service
        self.credibility_service = credibility_service
        self.content_settings = content_settings

    def validate_content(self, content: str | None) -> str:
        """Check freet content.

        Returns:
            The content unchanged

        Raises:
            InvalidInputError: If content is blank
            ContentTooLongError: If content exceeds the length limit
        """
        if not content or not content.strip():
            raise InvalidInputError("Freet content must be at least one character long.")
        limit = self.content_settings.max_freet_length
        if len(content) > limit:
            raise ContentTooLongError(
                f"Freet content must be no more than {limit} characters."
            )
        return content

    async def create_freet(
        self, author_id: UserId, content: str, tag_names: Sequence[TagName] = ()
    ) -> Freet:
        """Publish a new freet.

        Args:
            author_id: Author's user ID
            content: Freet text
            tag_names: Tags to attach, created on first use

        Returns:
            Created freet
        """
        with logfire.span("freet_service.create_freet", author_id=str(author_id)):
            content = self.validate_content(content)
            tags = await self.tag_service.find_or_create_many(tag_names)

            now = datetime.now()
            freet = Freet(
                id=FreetId(uuid4()),
                author_id=author_id,
                content=content,
                date_created=now,
                date_modified=now,
                tag_ids=frozenset(tag.id for tag in tags),
            )
            saved = await self.freet_repository.save(freet)
            logfire.info("Freet created", freet_id=str(saved.id), tags=len(tags))
            return saved

    async def get_freet(self, freet_id: FreetId) -> Freet | None:
        """Get a freet by ID.

        Returns:
            Hydrated freet if found, None otherwise
        """
        with logfire.span("freet_service.get_freet", freet_id=str(freet_id)):
            freet = await self.freet_repository.find_by_id(freet_id)
            if not freet:
                logfire.warn("Freet not found", freet_id=str(freet_id))
                return None
            return (await self._hydrate([freet]))[0]

    async def list_freets(self) -> list[Freet]:
        """All freets, most recently modified first."""
        with logfire.span("freet_service.list_freets"):
            return await self._hydrate(await self.freet_repository.find_all())

    async def list_freets_by_author(self, author_id: UserId) -> list[Freet]:
        """Freets of one author, most recently modified first."""
        with logfire.span("freet_service.list_freets_by_author", author_id=str(author_id)):
            return await self._hydrate(
                await self.freet_repository.find_by_author(author_id)
            )

    async def filter_by_authors_or_tags(
        self, author_ids: Sequence[UserId], tag_ids: Sequence[TagId]
    ) -> list[Freet]:
        """Freets by any of the authors or tagged with any of the tags.

        Matching is a union. Each freet appears once, most recently
        modified first.
        """
        with logfire.span(
            "freet_service.filter_by_authors_or_tags",
            authors=len(author_ids),
            tags=len(tag_ids),
        ):
            if not author_ids and not tag_ids:
                return []
            freets = await self.freet_repository.find_by_authors_or_tags(
                list(author_ids), list(tag_ids)
            )
            logfire.info("Freets matched", count=len(freets))
            return await self._hydrate(freets)

    async def update_freet(
        self,
        freet: Freet,
        content: str | None = None,
        tag_names: Sequence[TagName] | None = None,
    ) -> Freet:
        """Replace content and/or tag set of a freet.

        Args:
            freet: Freet to update
            content: New content, unchanged when None
            tag_names: New tag set, unchanged when None

        Returns:
            Updated freet with a refreshed modification date
        """
        with logfire.span("freet_service.update_freet", freet_id=str(freet.id)):
            update: dict = {"date_modified": datetime.now()}
            if content is not None:
                update["content"] = self.validate_content(content)
            if tag_names is not None:
                tags = await self.tag_service.find_or_create_many(tag_names)
                update["tag_ids"] = frozenset(tag.id for tag in tags)

            saved = await self.freet_repository.save(freet.model_copy(update=update))
            logfire.info("Freet updated", freet_id=str(freet.id))
            return (await self._hydrate([saved]))[0]

    async def delete_freet(self, freet_id: FreetId) -> None:
        """Delete a freet together with its votes and links."""
        with logfire.span("freet_service.delete_freet", freet_id=str(freet_id)):
            await self.credibility_service.delete_for_freets([freet_id])
            await self.freet_repository.delete(freet_id)
            logfire.info("Freet deleted", freet_id=str(freet_id))

    async def delete_freets_by_author(self, author_id: UserId) -> None:
        """Delete every freet of an author, with their votes and links."""
        with logfire.span(
            "freet_service.delete_freets_by_author", author_id=str(author_id)
        ):
            freets = await self.freet_repository.find_by_author(author_id)
            freet_ids = [freet.id for freet in freets]
            await self.credibility_service.delete_for_freets(freet_ids)
            await self.freet_repository.delete_by_author(author_id)
            logfire.info("Freets deleted", author_id=str(author_id), count=len(freet_ids))

    async def _hydrate(self, freets: list[Freet]) -> list[Freet]:
        if not freets:
            return []
        credibility = await self.credibility_service.get_credibility(
            [freet.id for freet in freets]
        )
        return [
            freet.model_copy(
                update={
                    "upvotes": credibility[freet.id].upvotes,
                    "downvotes": credibility[freet.id].downvotes,
                    "links": credibility[freet.id].links,
                }
            )
            for freet in freets
        ]
