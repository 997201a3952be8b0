"""List filters use case."""

from pydantic import BaseModel

from fritter.application.usecase.guard import require_user
from fritter.application.view import FilterView, ViewBuilder
from fritter.domain.service import FilterService, UserService

from .common import require_named_filter


class ListFiltersRequest(BaseModel):
    """List filters request."""

    user_id: str | None
    name: str | None = None  # Set to fetch a single filter


class ListFiltersUseCase:
    """Use case for reading the caller's filters.

    Returns every filter of the caller, or only the one with the requested
    name.
    """

    def __init__(
        self,
        user_service: UserService,
        filter_service: FilterService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.filter_service = filter_service
        self.view_builder = view_builder

    async def execute(self, request: ListFiltersRequest) -> list[FilterView] | FilterView:
        """Execute list filters flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            InvalidInputError: If the name is empty
            NotFoundError: If the caller has no filter with the name
        """
        user = await require_user(self.user_service, request.user_id)

        if request.name is None:
            filters = await self.filter_service.list_filters(user.id)
            return await self.view_builder.filters(filters)

        filter_ = await require_named_filter(self.filter_service, user.id, request.name)
        return await self.view_builder.filter(filter_)
