"""Credibility routes: votes and reference links on freets."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from fritter.application.usecase.credibility import (
    AddLinkRequest,
    AddLinkResponse,
    AddLinkUseCase,
    AddVoteRequest,
    AddVoteResponse,
    AddVoteUseCase,
    ListLinksRequest,
    ListLinksUseCase,
    ListVotesRequest,
    ListVotesUseCase,
    RemoveLinkRequest,
    RemoveLinkResponse,
    RemoveLinkUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from fritter.application.view import ReferenceLinkView, VoteView
from fritter.domain.service import JWTService

router = APIRouter(prefix="/credibility", tags=["credibility"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for a credibility vote."""

    credible: Any = None


class LinkAPIRequest(BaseModel):
    """API request for a reference link."""

    link: Any = None


@router.get("/{freet_id}/votes", response_model=list[VoteView])
async def list_votes(
    freet_id: str, use_case: FromDishka[ListVotesUseCase]
) -> list[VoteView]:
    """List the votes on a freet."""
    return await use_case.execute(ListVotesRequest(freet_id=freet_id))


@router.post(
    "/{freet_id}/votes",
    response_model=AddVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_vote(
    freet_id: str,
    use_case: FromDishka[AddVoteUseCase],
    jwt_service: FromDishka[JWTService],
    request: VoteAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> AddVoteResponse:
    """Vote on whether a freet is credible.

    Raises:
        ConflictError: If the caller already voted on the freet (409)
    """
    request = request or VoteAPIRequest()
    return await use_case.execute(
        AddVoteRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            freet_id=freet_id,
            credible=request.credible,
        )
    )


@router.delete("/{freet_id}/votes", response_model=RemoveVoteResponse)
async def remove_vote(
    freet_id: str,
    use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Withdraw the caller's vote on a freet."""
    return await use_case.execute(
        RemoveVoteRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token), freet_id=freet_id
        )
    )


@router.get("/{freet_id}/links", response_model=list[ReferenceLinkView])
async def list_links(
    freet_id: str, use_case: FromDishka[ListLinksUseCase]
) -> list[ReferenceLinkView]:
    """List the reference links on a freet."""
    return await use_case.execute(ListLinksRequest(freet_id=freet_id))


@router.post(
    "/{freet_id}/links",
    response_model=AddLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_link(
    freet_id: str,
    use_case: FromDishka[AddLinkUseCase],
    jwt_service: FromDishka[JWTService],
    request: LinkAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> AddLinkResponse:
    """Attach a reference link to a freet.

    Raises:
        ContentTooLongError: If the link is not a web URL (413)
    """
    request = request or LinkAPIRequest()
    return await use_case.execute(
        AddLinkRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            freet_id=freet_id,
            link=request.link,
        )
    )


@router.delete("/{freet_id}/links/{link_id}", response_model=RemoveLinkResponse)
async def remove_link(
    freet_id: str,
    link_id: str,
    use_case: FromDishka[RemoveLinkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveLinkResponse:
    """Delete a reference link. Only the user who added it may do so."""
    return await use_case.execute(
        RemoveLinkRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            freet_id=freet_id,
            link_id=link_id,
        )
    )
