"""Register user use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.view import UserView, user_view
from fritter.domain.error import InvalidInputError
from fritter.domain.service import JWTService, UserService
from fritter.domain.value import Username
from fritter.domain.value.types import PASSWORD_PATTERN, is_word


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: Any = None
    password: Any = None


class RegisterUserResponse(BaseModel):
    """Register user response."""

    user: UserView
    token: str  # Session token for the new account


def validate_username(username: Any) -> Username:
    """Check username format.

    Raises:
        InvalidInputError: If the username is not a nonempty word
    """
    if not isinstance(username, str) or not is_word(username):
        raise InvalidInputError("Username must be a nonempty alphanumeric string.")
    return Username(username)


def validate_password(password: Any) -> str:
    """Check password format.

    Raises:
        InvalidInputError: If the password is empty or contains whitespace
    """
    if not isinstance(password, str) or not PASSWORD_PATTERN.match(password):
        raise InvalidInputError("Password must be a nonempty string with no spaces.")
    return password


class RegisterUserUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration.

        Raises:
            InvalidInputError: If username or password is malformed
            ConflictError: If the username is taken
        """
        username = validate_username(request.username)
        password = validate_password(request.password)

        user = await self.user_service.register(username, password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)

        return RegisterUserResponse(user=user_view(user), token=token)
