"""Credibility vote entity."""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import FreetId, UserId, VoteId


class Vote(DomainModel):
    """A user's judgment of whether a freet is credible.

    One vote per user per freet (enforced by a unique constraint on
    freet_id and issuer_id).
    """

    id: VoteId
    freet_id: FreetId
    issuer_id: UserId
    credible: bool
    created_at: datetime = Field(default_factory=datetime.now)
