"""Credibility domain service: votes and reference links on freets."""

from collections import defaultdict
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError

from fritter.domain.error import ConflictError, ContentTooLongError, NotFoundError
from fritter.domain.model.reference_link import ReferenceLink
from fritter.domain.model.vote import Vote
from fritter.domain.repository import ReferenceLinkRepository, VoteRepository
from fritter.domain.value import FreetId, ReferenceLinkId, UserId, VoteId
from fritter.domain.value.types import URL_PATTERN

from .base import Service


class Credibility(BaseModel):
    """Vote sets and links of one freet."""

    upvotes: frozenset[UserId] = frozenset()
    downvotes: frozenset[UserId] = frozenset()
    links: list[ReferenceLink] = Field(default_factory=list)


class CredibilityService(Service):
    """Domain service for credibility votes and reference links."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        reference_link_repository: ReferenceLinkRepository,
    ) -> None:
        """Initialize credibility service.

        Args:
            vote_repository: Vote repository
            reference_link_repository: Reference link repository
        """
        self.vote_repository = vote_repository
        self.reference_link_repository = reference_link_repository

    async def add_vote(self, freet_id: FreetId, user_id: UserId, credible: bool) -> Vote:
        """Record a user's vote on a freet.

        Args:
            freet_id: Freet ID
            user_id: Voting user
            credible: Whether the user finds the freet credible

        Returns:
            Created vote

        Raises:
            ConflictError: If the user already voted on this freet, either way
        """
        with logfire.span(
            "credibility_service.add_vote",
            freet_id=str(freet_id),
            user_id=str(user_id),
            credible=credible,
        ):
            vote = Vote(
                id=VoteId(uuid4()),
                freet_id=freet_id,
                issuer_id=user_id,
                credible=credible,
                created_at=datetime.now(),
            )

            # The unique (freet, issuer) constraint rejects a second vote
            try:
                saved = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt", user_id=str(user_id), freet_id=str(freet_id)
                )
                raise ConflictError("You have already issued a vote for this freet.")

            logfire.info("Vote issued", vote_id=str(saved.id))
            return saved

    async def remove_vote(self, freet_id: FreetId, user_id: UserId) -> None:
        """Withdraw a user's vote on a freet.

        Raises:
            NotFoundError: If the user has no vote on this freet
        """
        with logfire.span(
            "credibility_service.remove_vote",
            freet_id=str(freet_id),
            user_id=str(user_id),
        ):
            deleted = await self.vote_repository.delete_by_freet_and_issuer(
                freet_id, user_id
            )
            if not deleted:
                logfire.info(
                    "No vote to remove", freet_id=str(freet_id), user_id=str(user_id)
                )
                raise NotFoundError(
                    "Vote",
                    str(freet_id),
                    "You have not issued a vote for this freet.",
                )
            logfire.info("Vote removed", freet_id=str(freet_id), user_id=str(user_id))

    async def list_votes(self, freet_id: FreetId) -> list[Vote]:
        """All votes on a freet, oldest first."""
        return await self.vote_repository.find_by_freet(freet_id)

    def validate_link(self, link: str | None) -> str:
        """Check that a reference link looks like a web URL.

        Raises:
            ContentTooLongError: If the link does not match the URL format
        """
        if not link or not URL_PATTERN.search(link):
            raise ContentTooLongError("Link must be a valid URL.")
        return link

    async def add_link(self, freet_id: FreetId, user_id: UserId, link: str) -> ReferenceLink:
        """Attach a reference link to a freet.

        Raises:
            ContentTooLongError: If the link does not match the URL format
        """
        with logfire.span(
            "credibility_service.add_link", freet_id=str(freet_id), user_id=str(user_id)
        ):
            ref_link = ReferenceLink(
                id=ReferenceLinkId(uuid4()),
                freet_id=freet_id,
                issuer_id=user_id,
                link=self.validate_link(link),
                date_created=datetime.now(),
            )
            saved = await self.reference_link_repository.save(ref_link)
            logfire.info("Reference link added", link_id=str(saved.id))
            return saved

    async def get_link(self, link_id: ReferenceLinkId) -> ReferenceLink | None:
        """Get a reference link by ID."""
        link = await self.reference_link_repository.find_by_id(link_id)
        if not link:
            logfire.warn("Reference link not found", link_id=str(link_id))
        return link

    async def remove_link(self, link_id: ReferenceLinkId) -> None:
        """Delete a reference link."""
        with logfire.span("credibility_service.remove_link", link_id=str(link_id)):
            await self.reference_link_repository.delete(link_id)
            logfire.info("Reference link removed", link_id=str(link_id))

    async def list_links(self, freet_id: FreetId) -> list[ReferenceLink]:
        """Links on a freet in insertion order."""
        return await self.reference_link_repository.find_by_freet(freet_id)

    async def get_credibility(
        self, freet_ids: Sequence[FreetId]
    ) -> dict[FreetId, Credibility]:
        """Batch load vote sets and links for several freets.

        Args:
            freet_ids: Freet IDs

        Returns:
            Mapping with an entry for every requested freet
        """
        if not freet_ids:
            return {}

        votes = await self.vote_repository.find_by_freets(freet_ids)
        links = await self.reference_link_repository.find_by_freets(freet_ids)

        upvotes: dict[FreetId, set[UserId]] = defaultdict(set)
        downvotes: dict[FreetId, set[UserId]] = defaultdict(set)
        for vote in votes:
            (upvotes if vote.credible else downvotes)[vote.freet_id].add(vote.issuer_id)

        links_by_freet: dict[FreetId, list[ReferenceLink]] = defaultdict(list)
        for link in links:
            links_by_freet[link.freet_id].append(link)

        return {
            freet_id: Credibility(
                upvotes=frozenset(upvotes[freet_id]),
                downvotes=frozenset(downvotes[freet_id]),
                links=links_by_freet[freet_id],
            )
            for freet_id in freet_ids
        }

    async def delete_for_freets(self, freet_ids: Sequence[FreetId]) -> None:
        """Delete votes and links on the given freets."""
        if not freet_ids:
            return
        await self.vote_repository.delete_by_freets(freet_ids)
        await self.reference_link_repository.delete_by_freets(freet_ids)

    async def delete_by_issuer(self, user_id: UserId) -> None:
        """Delete every vote and link a user issued."""
        with logfire.span("credibility_service.delete_by_issuer", user_id=str(user_id)):
            await self.vote_repository.delete_by_issuer(user_id)
            await self.reference_link_repository.delete_by_issuer(user_id)
