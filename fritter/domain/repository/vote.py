"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from fritter.domain.model.vote import Vote
from fritter.domain.value import FreetId, UserId


class VoteRepository(ABC):
    """Repository for credibility votes."""

    @abstractmethod
    async def find_by_freet(self, freet_id: FreetId) -> list[Vote]:
        """Find all votes on a freet, oldest first."""
        pass

    @abstractmethod
    async def find_by_freets(self, freet_ids: Sequence[FreetId]) -> list[Vote]:
        """Find all votes on several freets (batch query)."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the issuer already voted on the freet
        """
        pass

    @abstractmethod
    async def delete_by_freet_and_issuer(
        self, freet_id: FreetId, issuer_id: UserId
    ) -> bool:
        """Delete the issuer's vote on a freet.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every vote on the given freets."""
        pass

    @abstractmethod
    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every vote issued by a user."""
        pass
