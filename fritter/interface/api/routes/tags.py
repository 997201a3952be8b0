"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from fritter.application.usecase.tag import (
    GetTaglistRequest,
    GetTaglistUseCase,
    ListTagsUseCase,
)
from fritter.application.view import TaglistView, TagView

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=list[TagView],
    summary="List all tags",
    description="Get every tag ever attached to a freet or followed, by name.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> list[TagView]:
    """List all tags."""
    with logfire.span("api.list_tags"):
        return await use_case.execute()


@router.get("/{freet_id}", response_model=TaglistView)
async def get_taglist(
    freet_id: str, use_case: FromDishka[GetTaglistUseCase]
) -> TaglistView:
    """Get the tags of one freet.

    Example:
        GET /api/tags/6f1c...
    """
    return await use_case.execute(GetTaglistRequest(freet_id=freet_id))
