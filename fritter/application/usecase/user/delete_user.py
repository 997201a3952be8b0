"""Delete user use case."""

import logfire
from pydantic import BaseModel

from fritter.application.usecase.guard import require_user
from fritter.domain.service import (
    CredibilityService,
    FilterService,
    FollowService,
    FreetService,
    UserService,
)


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str | None


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    message: str = "Your account has been deleted successfully."


class DeleteUserUseCase:
    """Use case for deleting an account and everything hanging off it.

    Removes the user's freets (with the votes and links on them), the votes
    and links the user issued elsewhere, their follow edges in either
    direction and their filters, and prunes them from other users' filters.
    All of it happens in the request transaction.
    """

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        follow_service: FollowService,
        filter_service: FilterService,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.credibility_service = credibility_service
        self.follow_service = follow_service
        self.filter_service = filter_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute the account deletion.

        Raises:
            UnauthenticatedError: If nobody is signed in
        """
        user = await require_user(self.user_service, request.user_id)

        with logfire.span("delete_user_cascade", user_id=str(user.id)):
            await self.freet_service.delete_freets_by_author(user.id)
            await self.credibility_service.delete_by_issuer(user.id)
            await self.follow_service.delete_by_user(user.id)
            await self.filter_service.purge_user(user.id)
            await self.user_service.delete_user(user.id)

        return DeleteUserResponse()
