"""Get session use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import parse_id
from fritter.application.view import UserView, user_view
from fritter.domain.service import UserService
from fritter.domain.value import UserId


class GetSessionRequest(BaseModel):
    """Get session request."""

    user_id: str | None = None  # From the session cookie, if any


class GetSessionResponse(BaseModel):
    """Get session response."""

    message: str = "Your session info was found successfully."
    user: UserView | None


class GetSessionUseCase:
    """Use case for reading who is signed in."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetSessionRequest) -> GetSessionResponse:
        """Return the signed-in user, or no user for an anonymous session."""
        user_id = parse_id(request.user_id, UserId)
        user = await self.user_service.get_user_by_id(user_id) if user_id else None
        return GetSessionResponse(user=user_view(user) if user else None)
