"""Update filter use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import (
    body_strings,
    body_text,
    parse_id,
    parse_tag_names,
    require_user,
    resolve_usernames,
)
from fritter.application.view import FilterView, ViewBuilder
from fritter.domain.error import ForbiddenError, NotFoundError
from fritter.domain.model import Filter, User
from fritter.domain.service import FilterService, TagService, UserService
from fritter.domain.value import FilterId

from .common import parse_filter_name


async def require_own_filter(
    filter_service: FilterService, user: User, filter_id: str
) -> Filter:
    """Resolve a filter the caller owns.

    Raises:
        NotFoundError: If no filter has the ID
        ForbiddenError: If the filter belongs to another user
    """
    parsed = parse_id(filter_id, FilterId)
    filter_ = await filter_service.get_filter(parsed) if parsed else None
    if not filter_:
        raise NotFoundError("Filter", filter_id, f"Filter with id {filter_id} does not exist.")
    if filter_.owner_id != user.id:
        raise ForbiddenError("You cannot modify filters that do not belong to you.")
    return filter_


class UpdateFilterRequest(BaseModel):
    """Update filter request.

    The name, usernames and tags replace the current ones.
    """

    user_id: str | None
    filter_id: str
    name: Any = None
    usernames: Any = None
    tags: Any = None


class UpdateFilterResponse(BaseModel):
    """Update filter response."""

    message: str = "Filter was updated successfully."
    filter: FilterView


class UpdateFilterUseCase:
    """Use case for replacing the contents of a saved filter."""

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

    async def execute(self, request: UpdateFilterRequest) -> UpdateFilterResponse:
        """Execute update filter flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the filter or a username does not exist
            ForbiddenError: If the caller does not own the filter
            InvalidInputError: If the name or a tag is malformed
            ConflictError: If another filter of the caller has the name
        """
        user = await require_user(self.user_service, request.user_id)
        filter_ = await require_own_filter(self.filter_service, user, request.filter_id)

        name = parse_filter_name(body_text(request.name, "name"))
        await self.filter_service.ensure_name_available(user.id, name, current=filter_)
        users = await resolve_usernames(
            self.user_service, body_strings(request.usernames, "usernames")
        )
        tag_names = parse_tag_names(body_strings(request.tags, "tags"))

        tags = await self.tag_service.find_or_create_many(tag_names)
        updated = await self.filter_service.update_filter(
            filter_, name, [u.id for u in users], [t.id for t in tags]
        )

        view = await self.view_builder.filter(updated)
        return UpdateFilterResponse(filter=view)
