"""In-memory vote repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from fritter.domain.model.vote import Vote
from fritter.domain.repository.vote import VoteRepository
from fritter.domain.value import FreetId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_freet(self, freet_id: FreetId) -> list[Vote]:
        """Find all votes on a freet."""
        return [v for v in self._votes if v.freet_id == freet_id]

    async def find_by_freets(self, freet_ids: Sequence[FreetId]) -> list[Vote]:
        """Find all votes on several freets."""
        wanted = set(freet_ids)
        return [v for v in self._votes if v.freet_id in wanted]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the issuer already voted on the freet
        """
        for existing in self._votes:
            if (
                existing.freet_id == vote.freet_id
                and existing.issuer_id == vote.issuer_id
            ):
                raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_freet_and_issuer(
        self, freet_id: FreetId, issuer_id: UserId
    ) -> bool:
        """Delete the issuer's vote on a freet."""
        for i, vote in enumerate(self._votes):
            if vote.freet_id == freet_id and vote.issuer_id == issuer_id:
                self._votes.pop(i)
                return True
        return False

    async def delete_by_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete every vote on the given freets."""
        doomed = set(freet_ids)
        self._votes = [v for v in self._votes if v.freet_id not in doomed]

    async def delete_by_issuer(self, issuer_id: UserId) -> None:
        """Delete every vote issued by a user."""
        self._votes = [v for v in self._votes if v.issuer_id != issuer_id]
