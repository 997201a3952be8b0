"""Freet use cases."""

from .create_freet import CreateFreetRequest, CreateFreetResponse, CreateFreetUseCase
from .delete_freet import DeleteFreetRequest, DeleteFreetResponse, DeleteFreetUseCase
from .get_freet import GetFreetRequest, GetFreetUseCase
from .list_freets import ListFreetsRequest, ListFreetsUseCase
from .update_freet import UpdateFreetRequest, UpdateFreetResponse, UpdateFreetUseCase

__all__ = [
    "CreateFreetRequest",
    "CreateFreetResponse",
    "CreateFreetUseCase",
    "DeleteFreetRequest",
    "DeleteFreetResponse",
    "DeleteFreetUseCase",
    "GetFreetRequest",
    "GetFreetUseCase",
    "ListFreetsRequest",
    "ListFreetsUseCase",
    "UpdateFreetRequest",
    "UpdateFreetResponse",
    "UpdateFreetUseCase",
]
