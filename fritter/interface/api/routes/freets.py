"""Freet routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from fritter.application.usecase.freet import (
    CreateFreetRequest,
    CreateFreetResponse,
    CreateFreetUseCase,
    DeleteFreetRequest,
    DeleteFreetResponse,
    DeleteFreetUseCase,
    GetFreetRequest,
    GetFreetUseCase,
    ListFreetsRequest,
    ListFreetsUseCase,
    UpdateFreetRequest,
    UpdateFreetResponse,
    UpdateFreetUseCase,
)
from fritter.application.view import FreetView
from fritter.domain.service import JWTService

router = APIRouter(prefix="/freets", tags=["freets"], route_class=DishkaRoute)


class FreetAPIRequest(BaseModel):
    """API request for writing a freet."""

    content: Any = None
    tags: Any = None


@router.get("", response_model=list[FreetView])
async def list_freets(
    use_case: FromDishka[ListFreetsUseCase],
    author: str | None = None,
) -> list[FreetView]:
    """List all freets, or those of one author.

    Example:
        GET /api/freets?author=alice
    """
    with logfire.span("api.list_freets", author=author):
        return await use_case.execute(ListFreetsRequest(author=author))


@router.post("", response_model=CreateFreetResponse, status_code=status.HTTP_201_CREATED)
async def create_freet(
    use_case: FromDishka[CreateFreetUseCase],
    jwt_service: FromDishka[JWTService],
    request: FreetAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> CreateFreetResponse:
    """Publish a freet.

    Raises:
        UnauthenticatedError: If not signed in (403)
        InvalidInputError: If the content is blank or a tag is malformed (400)
        ContentTooLongError: If the content is too long (413)
    """
    request = request or FreetAPIRequest()
    return await use_case.execute(
        CreateFreetRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            content=request.content,
            tags=request.tags,
        )
    )


@router.get("/{freet_id}", response_model=FreetView)
async def get_freet(freet_id: str, use_case: FromDishka[GetFreetUseCase]) -> FreetView:
    """Get one freet."""
    return await use_case.execute(GetFreetRequest(freet_id=freet_id))


@router.patch("/{freet_id}", response_model=UpdateFreetResponse)
async def update_freet(
    freet_id: str,
    use_case: FromDishka[UpdateFreetUseCase],
    jwt_service: FromDishka[JWTService],
    request: FreetAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> UpdateFreetResponse:
    """Edit a freet. Only its author may do so."""
    request = request or FreetAPIRequest()
    return await use_case.execute(
        UpdateFreetRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            freet_id=freet_id,
            content=request.content,
            tags=request.tags,
        )
    )


@router.delete("/{freet_id}", response_model=DeleteFreetResponse)
async def delete_freet(
    freet_id: str,
    use_case: FromDishka[DeleteFreetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteFreetResponse:
    """Delete a freet. Only its author may do so."""
    return await use_case.execute(
        DeleteFreetRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token), freet_id=freet_id
        )
    )
