"""In-memory user repository for testing."""

from copy import deepcopy
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from fritter.domain.model.user import User
from fritter.domain.repository.user import UserRepository
from fritter.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id)
        return deepcopy(user) if user else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users by ID."""
        return [deepcopy(self._users[uid]) for uid in user_ids if uid in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        key = username.casefold()
        for user in self._users.values():
            if user.username.casefold() == key:
                return deepcopy(user)
        return None

    async def find_by_usernames(self, usernames: Sequence[Username]) -> list[User]:
        """Find multiple users by username, ignoring case."""
        keys = {username.casefold() for username in usernames}
        return [
            deepcopy(user)
            for user in self._users.values()
            if user.username.casefold() in keys
        ]

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If another user holds the username
        """
        existing = await self.find_by_username(user.username)
        if existing and existing.id != user.id:
            raise IntegrityError("Duplicate username", None, Exception())

        self._users[user.id] = deepcopy(user)
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)
