"""Tag use cases."""

from .get_taglist import GetTaglistRequest, GetTaglistUseCase
from .list_tags import ListTagsUseCase

__all__ = [
    "GetTaglistRequest",
    "GetTaglistUseCase",
    "ListTagsUseCase",
]
