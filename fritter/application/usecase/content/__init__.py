"""Content query use cases."""

from .query_content import QueryContentRequest, QueryContentUseCase

__all__ = [
    "QueryContentRequest",
    "QueryContentUseCase",
]
