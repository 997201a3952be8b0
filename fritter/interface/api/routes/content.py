"""Content query routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from fritter.application.usecase.content import QueryContentRequest, QueryContentUseCase
from fritter.application.view import FreetView
from fritter.domain.service import JWTService

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request body for a content query.

    Same fields as the query string form.
    """

    usernames: Any = None
    tags: Any = None
    name: Any = None


@router.get("", response_model=list[FreetView])
async def query_content(
    use_case: FromDishka[QueryContentUseCase],
    jwt_service: FromDishka[JWTService],
    usernames: str | None = None,
    tags: str | None = None,
    name: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> list[FreetView]:
    """Freets matching explicit sources, a saved filter, or the follow graph.

    Examples:
        GET /api/content?usernames=alice,bob&tags=news
        GET /api/content?name=science
        GET /api/content
    """
    with logfire.span("api.query_content", has_name=name is not None):
        return await use_case.execute(
            QueryContentRequest(
                user_id=jwt_service.get_user_id_from_token(auth_token),
                usernames=usernames,
                tags=tags,
                name=name,
            )
        )


@router.post("", response_model=list[FreetView])
async def query_content_body(
    use_case: FromDishka[QueryContentUseCase],
    jwt_service: FromDishka[JWTService],
    request: ContentAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> list[FreetView]:
    """Same as GET, with the parameters in a JSON body."""
    request = request or ContentAPIRequest()
    with logfire.span("api.query_content", has_name=request.name is not None):
        return await use_case.execute(
            QueryContentRequest(
                user_id=jwt_service.get_user_id_from_token(auth_token),
                usernames=request.usernames,
                tags=request.tags,
                name=request.name,
            )
        )
