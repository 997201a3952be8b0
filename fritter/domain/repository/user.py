"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from fritter.domain.model.user import User
from fritter.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Username lookups are case-insensitive.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find multiple users by ID in a single query.

        Args:
            user_ids: User identifiers

        Returns:
            Found users (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case.

        Args:
            username: The username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_usernames(self, usernames: Sequence[Username]) -> list[User]:
        """Find multiple users by username, ignoring case.

        Args:
            usernames: Usernames to look up

        Returns:
            Found users (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If another user holds the username
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user ID to delete
        """
        pass
