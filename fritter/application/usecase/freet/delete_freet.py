"""Delete freet use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import require_freet, require_user
from fritter.domain.error import ForbiddenError
from fritter.domain.service import FreetService, UserService

from .update_freet import NOT_AUTHOR


class DeleteFreetRequest(BaseModel):
    """Delete freet request."""

    user_id: str | None
    freet_id: str


class DeleteFreetResponse(BaseModel):
    """Delete freet response."""

    message: str = "Your freet was deleted successfully."


class DeleteFreetUseCase:
    """Use case for deleting a freet with its votes and links."""

    def __init__(self, user_service: UserService, freet_service: FreetService) -> None:
        self.user_service = user_service
        self.freet_service = freet_service

    async def execute(self, request: DeleteFreetRequest) -> DeleteFreetResponse:
        """Execute delete freet flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet does not exist
            ForbiddenError: If the caller is not the author
        """
        user = await require_user(self.user_service, request.user_id)
        freet = await require_freet(self.freet_service, request.freet_id)
        if freet.author_id != user.id:
            raise ForbiddenError(NOT_AUTHOR)

        await self.freet_service.delete_freet(freet.id)
        return DeleteFreetResponse()
