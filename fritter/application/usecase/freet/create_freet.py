"""Create freet use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import (
    body_strings,
    body_text,
    parse_tag_names,
    require_user,
)
from fritter.application.view import FreetView, ViewBuilder
from fritter.domain.service import FreetService, UserService


class CreateFreetRequest(BaseModel):
    """Create freet request."""

    user_id: str | None
    content: Any = None
    tags: Any = None


class CreateFreetResponse(BaseModel):
    """Create freet response."""

    message: str = "Your freet was created successfully."
    freet: FreetView


class CreateFreetUseCase:
    """Use case for publishing a freet."""

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> None:
        """Initialize create freet use case.

        Args:
            user_service: User domain service
            freet_service: Freet domain service
            view_builder: Response view builder
        """
        self.user_service = user_service
        self.freet_service = freet_service
        self.view_builder = view_builder

    async def execute(self, request: CreateFreetRequest) -> CreateFreetResponse:
        """Execute create freet flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            InvalidInputError: If the content is blank or a tag is malformed
            ContentTooLongError: If the content is too long
        """
        user = await require_user(self.user_service, request.user_id)

        content = self.freet_service.validate_content(body_text(request.content, "content"))
        tag_names = parse_tag_names(body_strings(request.tags, "tags"))

        freet = await self.freet_service.create_freet(user.id, content, tag_names)
        view = await self.view_builder.freet(freet)
        return CreateFreetResponse(freet=view)
