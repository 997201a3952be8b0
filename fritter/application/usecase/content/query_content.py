"""Content query use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from fritter.application.usecase.filter.common import require_named_filter
from fritter.application.usecase.guard import (
    body_text,
    parse_tag_names,
    require_user,
    resolve_usernames,
    split_list,
)
from fritter.application.view import FreetView, ViewBuilder
from fritter.domain.error import InvalidInputError
from fritter.domain.service import (
    ContentService,
    FilterService,
    TagService,
    UserService,
)


class QueryContentRequest(BaseModel):
    """Content query request.

    Sources are picked by the first that applies: explicit usernames and
    tags (comma separated, both required), a saved filter name, or the
    caller's follow graph.
    """

    user_id: str | None
    usernames: Any = None
    tags: Any = None
    name: Any = None


class QueryContentUseCase:
    """Use case for reading the freets that match a user's interests."""

    def __init__(
        self,
        user_service: UserService,
        tag_service: TagService,
        filter_service: FilterService,
        content_service: ContentService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.tag_service = tag_service
        self.filter_service = filter_service
        self.content_service = content_service
        self.view_builder = view_builder

    async def execute(self, request: QueryContentRequest) -> list[FreetView]:
        """Execute content query flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            InvalidInputError: If only one of usernames and tags is given,
                the filter name is empty, or a tag is malformed
            NotFoundError: If the filter or a username does not exist
        """
        user = await require_user(self.user_service, request.user_id)

        usernames = body_text(request.usernames, "usernames")
        tags_param = body_text(request.tags, "tags")
        name = body_text(request.name, "name")

        if usernames is not None or tags_param is not None:
            # Explicit sources win, a filter name alongside them is ignored
            if usernames is None or tags_param is None:
                raise InvalidInputError("Provided parameters must be nonempty.")

            users = await resolve_usernames(self.user_service, split_list(usernames))
            tag_names = parse_tag_names(split_list(tags_param))
            tags = await self.tag_service.find_or_create_many(tag_names)

            logfire.info(
                "Content query by sources", users=len(users), tags=len(tags)
            )
            freets = await self.content_service.for_sources(
                [u.id for u in users], [t.id for t in tags]
            )
        elif name is not None:
            filter_ = await require_named_filter(self.filter_service, user.id, name)
            freets = await self.content_service.for_filter(filter_)
        else:
            freets = await self.content_service.for_following(user.id)

        return await self.view_builder.freets(freets)
