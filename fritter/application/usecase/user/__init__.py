"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_session import GetSessionRequest, GetSessionResponse, GetSessionUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .sign_in import SignInRequest, SignInResponse, SignInUseCase
from .update_user import UpdateUserRequest, UpdateUserResponse, UpdateUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetSessionRequest",
    "GetSessionResponse",
    "GetSessionUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
    "UpdateUserRequest",
    "UpdateUserResponse",
    "UpdateUserUseCase",
]
