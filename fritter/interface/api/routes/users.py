"""User and session routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from fritter.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetSessionRequest,
    GetSessionResponse,
    GetSessionUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    SignInRequest,
    SignInUseCase,
    UpdateUserRequest,
    UpdateUserResponse,
    UpdateUserUseCase,
)
from fritter.application.view import UserView
from fritter.config import AuthSettings, Settings
from fritter.domain.error import UnauthenticatedError
from fritter.domain.service import JWTService
from fritter.interface.api.session import clear_session_cookie, set_session_cookie

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """API request carrying a username and password."""

    username: Any = None
    password: Any = None


class UserAPIResponse(BaseModel):
    """Message and the affected account."""

    message: str
    user: UserView


class MessageAPIResponse(BaseModel):
    message: str


@router.post("", response_model=UserAPIResponse, status_code=status.HTTP_201_CREATED)
async def register(
    response: Response,
    use_case: FromDishka[RegisterUserUseCase],
    settings: FromDishka[Settings],
    auth_settings: FromDishka[AuthSettings],
    request: CredentialsAPIRequest | None = None,
) -> UserAPIResponse:
    """Create an account and sign it in.

    Raises:
        InvalidInputError: If the username or password is malformed (400)
        ConflictError: If the username is taken (409)
    """
    request = request or CredentialsAPIRequest()
    result = await use_case.execute(
        RegisterUserRequest(username=request.username, password=request.password)
    )
    set_session_cookie(response, result.token, settings, auth_settings)
    return UserAPIResponse(
        message=(
            "Your account was created successfully. "
            f"You have been logged in as {result.user.username}"
        ),
        user=result.user,
    )


@router.patch("", response_model=UpdateUserResponse)
async def update_user(
    use_case: FromDishka[UpdateUserUseCase],
    jwt_service: FromDishka[JWTService],
    request: CredentialsAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserResponse:
    """Change the signed-in user's username and/or password."""
    request = request or CredentialsAPIRequest()
    return await use_case.execute(
        UpdateUserRequest(
            user_id=jwt_service.get_user_id_from_token(auth_token),
            username=request.username,
            password=request.password,
        )
    )


@router.delete("", response_model=DeleteUserResponse)
async def delete_user(
    response: Response,
    use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    """Delete the signed-in account with everything it owns."""
    result = await use_case.execute(
        DeleteUserRequest(user_id=jwt_service.get_user_id_from_token(auth_token))
    )
    clear_session_cookie(response)
    return result


@router.get("/session", response_model=GetSessionResponse)
async def get_session(
    use_case: FromDishka[GetSessionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetSessionResponse:
    """Return the signed-in user, or no user."""
    return await use_case.execute(
        GetSessionRequest(user_id=jwt_service.get_user_id_from_token(auth_token))
    )


@router.post("/session", response_model=UserAPIResponse, status_code=status.HTTP_201_CREATED)
async def sign_in(
    response: Response,
    use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
    auth_settings: FromDishka[AuthSettings],
    request: CredentialsAPIRequest | None = None,
) -> UserAPIResponse:
    """Sign in with a username and password.

    Raises:
        InvalidInputError: If a credential is missing (400)
        UnauthenticatedError: If the credentials do not match (403)
    """
    request = request or CredentialsAPIRequest()
    result = await use_case.execute(
        SignInRequest(username=request.username, password=request.password)
    )
    set_session_cookie(response, result.token, settings, auth_settings)
    return UserAPIResponse(message="You have logged in successfully", user=result.user)


@router.delete("/session", response_model=MessageAPIResponse)
async def sign_out(
    response: Response,
    use_case: FromDishka[GetSessionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MessageAPIResponse:
    """Sign out the current user."""
    session = await use_case.execute(
        GetSessionRequest(user_id=jwt_service.get_user_id_from_token(auth_token))
    )
    if session.user is None:
        raise UnauthenticatedError()

    clear_session_cookie(response)
    logfire.info("User signed out", username=session.user.username)
    return MessageAPIResponse(message="You have been logged out successfully.")
