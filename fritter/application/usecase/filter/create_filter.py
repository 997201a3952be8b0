"""Create filter use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import (
    body_strings,
    body_text,
    parse_tag_names,
    require_user,
    resolve_usernames,
)
from fritter.application.view import FilterView, ViewBuilder
from fritter.domain.service import FilterService, TagService, UserService

from .common import parse_filter_name


class CreateFilterRequest(BaseModel):
    """Create filter request."""

    user_id: str | None
    name: Any = None
    usernames: Any = None
    tags: Any = None


class CreateFilterResponse(BaseModel):
    """Create filter response."""

    message: str = "Filter was created successfully."
    filter: FilterView


class CreateFilterUseCase:
    """Use case for saving a named filter over usernames and tags."""

    def __init__(
        self,
        user_service: UserService,
        tag_service: TagService,
        filter_service: FilterService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.tag_service = tag_service
        self.filter_service = filter_service
        self.view_builder = view_builder

    async def execute(self, request: CreateFilterRequest) -> CreateFilterResponse:
        """Execute create filter flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            InvalidInputError: If the name or a tag is malformed
            ConflictError: If the caller already has a filter with the name
            NotFoundError: If a username does not exist
        """
        user = await require_user(self.user_service, request.user_id)

        name = parse_filter_name(body_text(request.name, "name"))
        await self.filter_service.ensure_name_available(user.id, name)
        users = await resolve_usernames(
            self.user_service, body_strings(request.usernames, "usernames")
        )
        tag_names = parse_tag_names(body_strings(request.tags, "tags"))

        tags = await self.tag_service.find_or_create_many(tag_names)
        filter_ = await self.filter_service.create_filter(
            user.id, name, [u.id for u in users], [t.id for t in tags]
        )

        view = await self.view_builder.filter(filter_)
        return CreateFilterResponse(filter=view)
