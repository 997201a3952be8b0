"""Delete filter use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import require_user
from fritter.domain.service import FilterService, UserService

from .update_filter import require_own_filter


class DeleteFilterRequest(BaseModel):
    """Delete filter request."""

    user_id: str | None
    filter_id: str


class DeleteFilterResponse(BaseModel):
    """Delete filter response."""

    message: str = "Your filter was deleted successfully."


class DeleteFilterUseCase:
    """Use case for deleting a saved filter."""

    def __init__(self, user_service: UserService, filter_service: FilterService) -> None:
        self.user_service = user_service
        self.filter_service = filter_service

    async def execute(self, request: DeleteFilterRequest) -> DeleteFilterResponse:
        user = await require_user(self.user_service, request.user_id)
        filter_ = await require_own_filter(self.filter_service, user, request.filter_id)

        await self.filter_service.delete_filter(filter_.id)
        return DeleteFilterResponse()
