"""Freet aggregate root."""

from datetime import datetime

from pydantic import Field, model_validator

from fritter.domain.model.common import DomainModel
from fritter.domain.model.reference_link import ReferenceLink
from fritter.domain.value import FreetId, TagId, UserId


class Freet(DomainModel):
    """Freet aggregate root.

    A short post with its tag set and credibility state. ``upvotes`` and
    ``downvotes`` are derived from vote records and never share a user.
    """

    id: FreetId
    author_id: UserId
    content: str = Field(min_length=1)
    date_created: datetime = Field(default_factory=datetime.now)
    date_modified: datetime = Field(default_factory=datetime.now)
    tag_ids: frozenset[TagId] = frozenset()
    upvotes: frozenset[UserId] = frozenset()
    downvotes: frozenset[UserId] = frozenset()
    links: list[ReferenceLink] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_votes_disjoint(self) -> "Freet":
        """A user is either in upvotes or downvotes, never both."""
        if self.upvotes & self.downvotes:
            raise ValueError("A user cannot both upvote and downvote a freet")
        return self
