"""Reference link use cases."""

from typing import Any

from pydantic import BaseModel, Field

from fritter.application.usecase.guard import (
    body_text,
    parse_id,
    require_freet,
    require_user,
)
from fritter.application.view import ReferenceLinkView, ViewBuilder
from fritter.domain.error import ForbiddenError, NotFoundError
from fritter.domain.service import CredibilityService, FreetService, UserService
from fritter.domain.value import ReferenceLinkId


class ListLinksRequest(BaseModel):
    """List links request."""

    freet_id: str


class AddLinkRequest(BaseModel):
    """Add link request."""

    user_id: str | None
    freet_id: str
    link: Any = None


class AddLinkResponse(BaseModel):
    """Add link response."""

    message: str = "Your reference link was added successfully."
    ref_link: ReferenceLinkView = Field(serialization_alias="refLink")


class RemoveLinkRequest(BaseModel):
    """Remove link request."""

    user_id: str | None
    freet_id: str
    link_id: str


class RemoveLinkResponse(BaseModel):
    """Remove link response."""

    message: str = "Your reference link was deleted successfully."


class ListLinksUseCase:
    """Use case for listing the reference links on a freet."""

    def __init__(
        self,
        freet_service: FreetService,
        credibility_service: CredibilityService,
        view_builder: ViewBuilder,
    ) -> None:
        self.freet_service = freet_service
        self.credibility_service = credibility_service
        self.view_builder = view_builder

    async def execute(self, request: ListLinksRequest) -> list[ReferenceLinkView]:
        freet = await require_freet(self.freet_service, request.freet_id)
        links = await self.credibility_service.list_links(freet.id)
        return await self.view_builder.links(links)


class AddLinkUseCase:
    """Use case for citing a source on a freet."""

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

    async def execute(self, request: AddLinkRequest) -> AddLinkResponse:
        """Execute add link flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet does not exist
            ContentTooLongError: If the link is not a web URL
        """
        user = await require_user(self.user_service, request.user_id)
        freet = await require_freet(self.freet_service, request.freet_id)
        link = self.credibility_service.validate_link(body_text(request.link, "link"))

        saved = await self.credibility_service.add_link(freet.id, user.id, link)
        views = await self.view_builder.links([saved])
        return AddLinkResponse(ref_link=views[0])


class RemoveLinkUseCase:
    """Use case for deleting a reference link, allowed to its issuer only."""

    def __init__(
        self,
        user_service: UserService,
        freet_service: FreetService,
        credibility_service: CredibilityService,
    ) -> None:
        self.user_service = user_service
        self.freet_service = freet_service
        self.credibility_service = credibility_service

    async def execute(self, request: RemoveLinkRequest) -> RemoveLinkResponse:
        """Execute remove link flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If the freet or the link does not exist, or the
                link belongs to another freet
            ForbiddenError: If the caller did not add the link
        """
        user = await require_user(self.user_service, request.user_id)
        freet = await require_freet(self.freet_service, request.freet_id)

        link_id = parse_id(request.link_id, ReferenceLinkId)
        link = await self.credibility_service.get_link(link_id) if link_id else None
        if not link or link.freet_id != freet.id:
            raise NotFoundError(
                "ReferenceLink",
                request.link_id,
                f"Reference link with ID {request.link_id} does not exist.",
            )

        if link.issuer_id != user.id:
            raise ForbiddenError("Cannot modify other users' reference links.")

        await self.credibility_service.remove_link(link.id)
        return RemoveLinkResponse()
