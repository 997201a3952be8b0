"""Follow use cases."""

from .create_follow import CreateFollowRequest, CreateFollowResponse, CreateFollowUseCase
from .delete_follow import DeleteFollowRequest, DeleteFollowResponse, DeleteFollowUseCase
from .list_follows import ListFollowsRequest, ListFollowsUseCase

__all__ = [
    "CreateFollowRequest",
    "CreateFollowResponse",
    "CreateFollowUseCase",
    "DeleteFollowRequest",
    "DeleteFollowResponse",
    "DeleteFollowUseCase",
    "ListFollowsRequest",
    "ListFollowsUseCase",
]
