"""Credibility vote use cases."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import body_flag, require_freet, require_user
from fritter.application.view import VoteView, ViewBuilder
from fritter.domain.error import InvalidInputError
from fritter.domain.service import CredibilityService, FreetService, UserService


class ListVotesRequest(BaseModel):
    """List votes request."""

    freet_id: str


class AddVoteRequest(BaseModel):
    """Add vote request."""

    user_id: str | None
    freet_id: str
    credible: Any = None


class AddVoteResponse(BaseModel):
    """Add vote response."""

    message: str = "Your vote was issued successfully."
    vote: VoteView


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    user_id: str | None
    freet_id: str


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    message: str = "Your vote was deleted successfully."


class ListVotesUseCase:
    """Use case for listing the votes on a freet."""

    def __init__(
        self,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> None:
        self.freet_service = freet_service
        self.credibility_service = credibility_service
        self.view_builder = view_builder

    async def execute(self, request: ListVotesRequest) -> list[VoteView]:
        freet = await require_freet(self.freet_service, request.freet_id)
        votes = await self.credibility_service.list_votes(freet.id)
        return await self.view_builder.votes(votes)


class AddVoteUseCase:
    """Use case for voting on a freet's credibility."""

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.credibility_service = credibility_service
        self.view_builder = view_builder

    async def execute(self, request: AddVoteRequest) -> AddVoteResponse:
        """Execute add vote flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet does not exist
            InvalidInputError: If credible is missing
            ConflictError: If the caller already voted on the freet
        """
        user = await require_user(self.user_service, request.user_id)
        freet = await require_freet(self.freet_service, request.freet_id)
        credible = body_flag(request.credible, "credible")
        if credible is None:
            raise InvalidInputError("Vote must say whether the freet is credible.")

        vote = await self.credibility_service.add_vote(freet.id, user.id, credible)
        views = await self.view_builder.votes([vote])
        return AddVoteResponse(vote=views[0])


class RemoveVoteUseCase:
    """Use case for withdrawing a vote."""

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.credibility_service = credibility_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet does not exist or carries no vote
                from the caller
        """
        user = await require_user(self.user_service, request.user_id)
        freet = await require_freet(self.freet_service, request.freet_id)

        await self.credibility_service.remove_vote(freet.id, user.id)
        return RemoveVoteResponse()
