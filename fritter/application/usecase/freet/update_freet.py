"""Update freet use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import (
    body_strings,
    body_text,
    parse_tag_names,
    require_freet,
    require_user,
)
from fritter.application.view import FreetView, ViewBuilder
from fritter.domain.error import ForbiddenError, InvalidInputError
from fritter.domain.service import FreetService, UserService

NOT_AUTHOR = "Cannot modify other users' freets."


class UpdateFreetRequest(BaseModel):
    """Update freet request."""

    user_id: str | None
    freet_id: str
    content: Any = None  # None keeps the current content
    tags: Any = None  # None keeps the current tags


class UpdateFreetResponse(BaseModel):
    """Update freet response."""

    message: str = "Your freet was updated successfully."
    freet: FreetView


class UpdateFreetUseCase:
    """Use case for editing a freet's content and tags."""

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.view_builder = view_builder

    async def execute(self, request: UpdateFreetRequest) -> UpdateFreetResponse:
        """Execute update freet flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet does not exist
            ForbiddenError: If the caller is not the author
            InvalidInputError: If nothing is updated or a value is malformed
            ContentTooLongError: If the new content is too long
        """
        # 1. Signed in
        user = await require_user(self.user_service, request.user_id)

        # 2. Freet exists
        freet = await require_freet(self.freet_service, request.freet_id)

        # 3. Caller wrote it
        if freet.author_id != user.id:
            raise ForbiddenError(NOT_AUTHOR)

        # 4. Payload
        new_content = body_text(request.content, "content")
        new_tags = body_strings(request.tags, "tags")
        if new_content is None and new_tags is None:
            raise InvalidInputError("Provide new content or tags for the freet.")
        content = (
            self.freet_service.validate_content(new_content)
            if new_content is not None
            else None
        )
        tag_names = parse_tag_names(new_tags) if new_tags is not None else None

        updated = await self.freet_service.update_freet(
            freet, content=content, tag_names=tag_names
        )
        view = await self.view_builder.freet(updated)
        return UpdateFreetResponse(freet=view)
