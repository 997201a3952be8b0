"""Follow repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fritter.domain.model.follow import Follow, FollowTarget
from fritter.domain.value import FollowId, UserId


class FollowRepository(ABC):
    """Repository for follow edges."""

    @abstractmethod
    async def find_by_id(self, follow_id: FollowId) -> Optional[Follow]:
        """Find a follow by ID."""
        pass

    @abstractmethod
    async def find_by_follower_and_target(
        self, follower_id: UserId, target: FollowTarget
    ) -> Optional[Follow]:
        """Find the follower's edge to a target, if any."""
        pass

    @abstractmethod
    async def find_by_follower(self, follower_id: UserId) -> list[Follow]:
        """Find every edge leaving a user (their following list)."""
        pass

    @abstractmethod
    async def find_by_target(self, target: FollowTarget) -> list[Follow]:
        """Find every edge pointing at a target (its followers)."""
        pass

    @abstractmethod
    async def save(self, follow: Follow) -> Follow:
        """Save a new follow.

        Raises:
            IntegrityError: If the follower already follows the target
        """
        pass

    @abstractmethod
    async def delete(self, follow_id: FollowId) -> None:
        """Delete a follow."""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every edge where the user is follower or followed user."""
        pass
