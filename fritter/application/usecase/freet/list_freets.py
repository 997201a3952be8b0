"""List freets use case."""

from pydantic import BaseModel

from fritter.application.view import FreetView, ViewBuilder
from fritter.domain.error import InvalidInputError, NotFoundError
from fritter.domain.service import FreetService, UserService
from fritter.domain.value import Username
from fritter.domain.value.types import is_word


class ListFreetsRequest(BaseModel):
    """List freets request."""

    author: str | None = None  # Username; None lists every freet


class ListFreetsUseCase:
    """Use case for listing all freets or the freets of one author.

    Freets come most recently modified first.
    """

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.view_builder = view_builder

    async def execute(self, request: ListFreetsRequest) -> list[FreetView]:
        """Execute list freets flow.

        Raises:
            InvalidInputError: If the author parameter is empty
            NotFoundError: If no user has the author username
        """
        if request.author is None:
            freets = await self.freet_service.list_freets()
            return await self.view_builder.freets(freets)

        if not request.author:
            raise InvalidInputError("Provided author username must be nonempty.")

        author = (
            await self.user_service.get_user_by_username(Username(request.author))
            if is_word(request.author)
            else None
        )
        if not author:
            raise NotFoundError(
                "User",
                request.author,
                f"A user with username {request.author} does not exist.",
            )

        freets = await self.freet_service.list_freets_by_author(author.id)
        return await self.view_builder.freets(freets)
