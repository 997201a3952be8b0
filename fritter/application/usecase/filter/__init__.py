"""Filter use cases."""

from .create_filter import CreateFilterRequest, CreateFilterResponse, CreateFilterUseCase
from .delete_filter import DeleteFilterRequest, DeleteFilterResponse, DeleteFilterUseCase
from .list_filters import ListFiltersRequest, ListFiltersUseCase
from .update_filter import UpdateFilterRequest, UpdateFilterResponse, UpdateFilterUseCase

__all__ = [
    "CreateFilterRequest",
    "CreateFilterResponse",
    "CreateFilterUseCase",
    "DeleteFilterRequest",
    "DeleteFilterResponse",
    "DeleteFilterUseCase",
    "ListFiltersRequest",
    "ListFiltersUseCase",
    "UpdateFilterRequest",
    "UpdateFilterResponse",
    "UpdateFilterUseCase",
]
