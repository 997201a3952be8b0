"""Update user use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import require_user
from fritter.application.view import UserView, user_view
from fritter.domain.service import UserService

from .register_user import validate_password, validate_username


class UpdateUserRequest(BaseModel):
    """Update user request."""

    user_id: str | None
    username: Any = None
    password: Any = None


class UpdateUserResponse(BaseModel):
    """Update user response."""

    message: str = "Your profile was updated successfully."
    user: UserView


class UpdateUserUseCase:
    """Use case for changing a user's username and/or password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UpdateUserResponse:
        """Execute the update.

        Raises:
            UnauthenticatedError: If nobody is signed in
            InvalidInputError: If a new value is malformed
            ConflictError: If the new username is taken
        """
        user = await require_user(self.user_service, request.user_id)

        username = (
            validate_username(request.username) if request.username is not None else None
        )
        password = (
            validate_password(request.password) if request.password is not None else None
        )

        updated = await self.user_service.update_user(
            user, username=username, password=password
        )
        return UpdateUserResponse(user=user_view(updated))
