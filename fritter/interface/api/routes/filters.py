"""Filter routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from fritter.application.usecase.filter import (
    CreateFilterRequest,
    CreateFilterResponse,
    CreateFilterUseCase,
    DeleteFilterRequest,
    DeleteFilterResponse,
    DeleteFilterUseCase,
    ListFiltersRequest,
    ListFiltersUseCase,
    UpdateFilterRequest,
    UpdateFilterResponse,
    UpdateFilterUseCase,
)
from fritter.application.view import FilterView
from fritter.domain.service import JWTService

router = APIRouter(prefix="/filters", tags=["filters"], route_class=DishkaRoute)


class FilterAPIRequest(BaseModel):
    """API request for saving a filter."""

    name: Any = None
    usernames: Any = None
    tags: Any = None


@router.get("", response_model=list[FilterView] | FilterView)
async def list_filters(
    use_case: FromDishka[ListFiltersUseCase],
    jwt_service: FromDishka[JWTService],
    name: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> list[FilterView] | FilterView:
    """List the caller's filters, or get the one with the given name.

    Example:
        GET /api/filters?name=science
    """
    return await use_case.execute(
        ListFiltersRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token), name=name
        )
    )


@router.post("", response_model=CreateFilterResponse, status_code=status.HTTP_201_CREATED)
async def create_filter(
    use_case: FromDishka[CreateFilterUseCase],
    jwt_service: FromDishka[JWTService],
    request: FilterAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> CreateFilterResponse:
    """Save a named filter over usernames and tags.

    Raises:
        InvalidInputError: If the name or a tag is malformed (400)
        NotFoundError: If a username does not exist (404)
        ConflictError: If the caller already uses the name (409)
    """
    request = request or FilterAPIRequest()
    return await use_case.execute(
        CreateFilterRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            name=request.name,
            usernames=request.usernames,
            tags=request.tags,
        )
    )


@router.patch("/{filter_id}", response_model=UpdateFilterResponse)
async def update_filter(
    filter_id: str,
    use_case: FromDishka[UpdateFilterUseCase],
    jwt_service: FromDishka[JWTService],
    request: FilterAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> UpdateFilterResponse:
    """Replace the name, usernames and tags of a filter."""
    request = request or FilterAPIRequest()
    return await use_case.execute(
        UpdateFilterRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            filter_id=filter_id,
            name=request.name,
            usernames=request.usernames,
            tags=request.tags,
        )
    )


@router.delete("/{filter_id}", response_model=DeleteFilterResponse)
async def delete_filter(
    filter_id: str,
    use_case: FromDishka[DeleteFilterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteFilterResponse:
    """Delete a filter."""
    return await use_case.execute(
        DeleteFilterRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token), filter_id=filter_id
        )
    )
