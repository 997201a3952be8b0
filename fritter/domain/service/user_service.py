"""User domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from fritter.domain.error import ConflictError
from fritter.domain.model.user import User
from fritter.domain.repository import UserRepository
from fritter.domain.value import UserId, Username

from .base import Service
from .password_service import PasswordService

USERNAME_TAKEN = "An account with this username already exists."


class UserService(Service):
    """Domain service for account operations."""

    def __init__(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.password_service = password_service

    async def register(self, username: Username, password: str) -> User:
        """Create a new account.

        Args:
            username: Requested username
            password: Plain text password

        Returns:
            Created user

        Raises:
            ConflictError: If the username is taken, ignoring case
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise ConflictError(USERNAME_TAKEN)

            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=self.password_service.hash_password(password),
                date_joined=datetime.now(),
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                logfire.warn("Concurrent registration", username=username.root)
                raise ConflictError(USERNAME_TAKEN)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, username: str, password: str) -> User | None:
        """Check credentials.

        Args:
            username: Username as typed
            password: Plain text password

        Returns:
            The user when the credentials match, None otherwise
        """
        with logfire.span("user_service.authenticate"):
            try:
                name = Username(username)
            except ValueError:
                return None

            user = await self.user_repository.find_by_username(name)
            if not user or not self.password_service.verify_password(
                password, user.password_hash
            ):
                logfire.info("Failed sign in attempt", username=username)
                return None

            logfire.info("User signed in", user_id=str(user.id))
            return user

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get a user by username, ignoring case."""
        return await self.user_repository.find_by_username(username)

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch lookup of users keyed by ID."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def get_users_by_usernames(self, usernames: Sequence[Username]) -> list[User]:
        """Batch lookup of users by username, ignoring case."""
        if not usernames:
            return []
        return await self.user_repository.find_by_usernames(usernames)

    async def update_user(
        self,
        user: User,
        username: Username | None = None,
        password: str | None = None,
    ) -> User:
        """Change a user's username and/or password.

        Raises:
            ConflictError: If the new username belongs to another user
        """
        with logfire.span("user_service.update_user", user_id=str(user.id)):
            update: dict = {}
            if username is not None and username != user.username:
                existing = await self.user_repository.find_by_username(username)
                if existing and existing.id != user.id:
                    raise ConflictError(USERNAME_TAKEN)
                update["username"] = username
            if password is not None:
                update["password_hash"] = self.password_service.hash_password(password)

            if not update:
                return user

            try:
                saved = await self.user_repository.save(user.model_copy(update=update))
            except IntegrityError:
                raise ConflictError(USERNAME_TAKEN)

            logfire.info("User updated", user_id=str(user.id), fields=sorted(update))
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Delete the account record itself."""
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))
