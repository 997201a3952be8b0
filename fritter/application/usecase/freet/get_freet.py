"""Get freet use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import require_freet
from fritter.application.view import FreetView, ViewBuilder
from fritter.domain.error import NotFoundError
from fritter.domain.service import FreetService


class GetFreetRequest(BaseModel):
    """Get freet request."""

    freet_id: str


class GetFreetUseCase:
    """Use case for reading one freet."""

    def __init__(self, freet_service: FreetService, view_builder: ViewBuilder) -> None:
        self.freet_service = freet_service
        self.view_builder = view_builder

    async def execute(self, request: GetFreetRequest) -> FreetView:
        """Execute get freet flow.

        Raises:
            NotFoundError: If no freet has the ID
        """
        freet = await require_freet(self.freet_service, request.freet_id)
        view = await self.view_builder.freet(freet)
        if view is None:
            raise NotFoundError(
                "Freet",
                request.freet_id,
                f"Freet with freet ID {request.freet_id} does not exist.",
            )
        return view
