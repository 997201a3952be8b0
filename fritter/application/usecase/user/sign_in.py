"""Sign in use case."""

from typing import Any

from pydantic import BaseModel

from fritter.application.usecase.guard import body_text
from fritter.application.view import UserView, user_view
from fritter.domain.error import InvalidInputError, UnauthenticatedError
from fritter.domain.service import JWTService, UserService


class SignInRequest(BaseModel):
    """Sign in request."""

    username: Any = None
    password: Any = None


class SignInResponse(BaseModel):
    """Sign in response."""

    user: UserView
    token: str


class SignInUseCase:
    """Use case for exchanging credentials for a session token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Check credentials and issue a session token.

        Raises:
            InvalidInputError: If username or password is missing
            UnauthenticatedError: If the credentials do not match
        """
        username = body_text(request.username, "username")
        password = body_text(request.password, "password")
        if not username or not password:
            raise InvalidInputError("Missing username or password credentials.")

        user = await self.user_service.authenticate(username, password)
        if not user:
            raise UnauthenticatedError("Invalid user login credentials provided.")

        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return SignInResponse(user=user_view(user), token=token)
