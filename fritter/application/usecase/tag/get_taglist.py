"""Get taglist use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import require_freet
from fritter.application.view import TaglistView, ViewBuilder
from fritter.domain.service import FreetService


class GetTaglistRequest(BaseModel):
    """Get taglist request."""

    freet_id: str


class GetTaglistUseCase:
    """Use case for reading the tags of one freet."""

    def __init__(self, freet_service: FreetService, view_builder: ViewBuilder) -> None:
        self.freet_service = freet_service
        self.view_builder = view_builder

    async def execute(self, request: GetTaglistRequest) -> TaglistView:
        """Execute get taglist flow.

        Raises:
            NotFoundError: If no freet has the ID
        """
        freet = await require_freet(self.freet_service, request.freet_id)
        return await self.view_builder.taglist(freet)
