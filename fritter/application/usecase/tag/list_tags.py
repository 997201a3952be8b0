"""List tags use case."""

from fritter.application.view import TagView, tag_view
from fritter.domain.service import TagService


class ListTagsUseCase:
    """Use case for listing every tag in name order."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self) -> list[TagView]:
        tags = await self.tag_service.get_all_tags()
        return [tag_view(tag) for tag in tags]
