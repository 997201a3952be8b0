"""Follow routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from fritter.application.usecase.follow import (
    CreateFollowRequest,
    CreateFollowResponse,
    CreateFollowUseCase,
    DeleteFollowRequest,
    DeleteFollowResponse,
    DeleteFollowUseCase,
    ListFollowsRequest,
    ListFollowsUseCase,
)
from fritter.application.view import FollowView
from fritter.domain.service import JWTService

router = APIRouter(prefix="/follow", tags=["follow"], route_class=DishkaRoute)


class FollowAPIRequest(BaseModel):
    """API request for following a source."""

    source: Any = None
    type: Any = None


@router.get("", response_model=list[FollowView])
async def list_follows(
    use_case: FromDishka[ListFollowsUseCase],
    following_of: str | None = Query(default=None, alias="followingOf"),
    followers_of: str | None = Query(default=None, alias="followersOf"),
) -> list[FollowView]:
    """List the sources a user follows, or the users following them.

    Example:
        GET /api/follow?followingOf=alice
    """
    return await use_case.execute(
        ListFollowsRequest(following_of=following_of, followers_of=followers_of)
    )


@router.post("", response_model=CreateFollowResponse, status_code=status.HTTP_201_CREATED)
async def create_follow(
    use_case: FromDishka[CreateFollowUseCase],
    jwt_service: FromDishka[JWTService],
    request: FollowAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> CreateFollowResponse:
    """Follow a user or a tag.

    Raises:
        NotFoundError: If the type or source is unknown (404)
        ConflictError: If following oneself or an already followed source (409)
    """
    request = request or FollowAPIRequest()
    return await use_case.execute(
        CreateFollowRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            source=request.source,
            type=request.type,
        )
    )


@router.delete("/{follow_id}", response_model=DeleteFollowResponse)
async def delete_follow(
    follow_id: str,
    use_case: FromDishka[DeleteFollowUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteFollowResponse:
    """Unfollow a source."""
    return await use_case.execute(
        DeleteFollowRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token), follow_id=follow_id
        )
    )
