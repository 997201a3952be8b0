"""Content query engine."""

from typing import Sequence

import logfire

from fritter.domain.model.filter import Filter
from fritter.domain.model.freet import Freet
from fritter.domain.value import TagId, UserId

from .base import Service
from .follow_service import FollowService
from .freet_service import FreetService


class ContentService(Service):
    """Finds freets matching a set of authors and tags.

    The sources come from explicit parameters, a saved filter, or the
    caller's follow graph. Matching is always a union.
    """

    def __init__(self, freet_service: FreetService, follow_service: FollowService) -> None:
        self.freet_service = freet_service
        self.follow_service = follow_service

    async def for_sources(
        self, author_ids: Sequence[UserId], tag_ids: Sequence[TagId]
    ) -> list[Freet]:
        """Freets by any of the authors or with any of the tags."""
        return await self.freet_service.filter_by_authors_or_tags(author_ids, tag_ids)

    async def for_filter(self, filter_: Filter) -> list[Freet]:
        """Freets matching a saved filter."""
        with logfire.span("content_service.for_filter", filter_id=str(filter_.id)):
            return await self.for_sources(list(filter_.user_ids), list(filter_.tag_ids))

    async def for_following(self, user_id: UserId) -> list[Freet]:
        """Freets from the users and tags a user follows."""
        with logfire.span("content_service.for_following", user_id=str(user_id)):
            user_ids, tag_ids = await self.follow_service.get_followed_sources(user_id)
            return await self.for_sources(user_ids, tag_ids)
