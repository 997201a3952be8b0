"""In-memory follow repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from fritter.domain.model.follow import Follow, FollowTarget, UserTarget
from fritter.domain.repository.follow import FollowRepository
from fritter.domain.value import FollowId, UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: list[Follow] = []

    async def find_by_id(self, follow_id: FollowId) -> Optional[Follow]:
        """Find a follow by ID."""
        return next((f for f in self._follows if f.id == follow_id), None)

    async def find_by_follower_and_target(
        self, follower_id: UserId, target: FollowTarget
    ) -> Optional[Follow]:
        """Find the follower's edge to a target."""
        return next(
            (
                f
                for f in self._follows
                if f.follower_id == follower_id and f.target == target
            ),
            None,
        )

    async def find_by_follower(self, follower_id: UserId) -> list[Follow]:
        """Find every edge leaving a user."""
        return [f for f in self._follows if f.follower_id == follower_id]

    async def find_by_target(self, target: FollowTarget) -> list[Follow]:
        """Find every edge pointing at a target."""
        return [f for f in self._follows if f.target == target]

    async def save(self, follow: Follow) -> Follow:
        """Save a follow.

        Raises:
            IntegrityError: If the follower already follows the target
        """
        if await self.find_by_follower_and_target(follow.follower_id, follow.target):
            raise IntegrityError("Duplicate follow", None, Exception())

        self._follows.append(follow)
        return follow

    async def delete(self, follow_id: FollowId) -> None:
        """Delete a follow."""
        self._follows = [f for f in self._follows if f.id != follow_id]

    async def delete_by_user(self, user_id: UserId) -> None:
        """Delete every edge where the user is follower or followed user."""
        as_target = UserTarget(user_id=user_id)
        self._follows = [
            f
            for f in self._follows
            if f.follower_id != user_id and f.target != as_target
        ]
