"""Saved content filter."""

from datetime import datetime

from pydantic import Field

from fritter.domain.model.common import DomainModel
from fritter.domain.value import FilterId, FilterName, TagId, UserId


class Filter(DomainModel):
    """A named set of usernames and tags owned by one user.

    Content matches a filter when its author is one of ``user_ids`` or it
    carries one of ``tag_ids``.
    """

    id: FilterId
    owner_id: UserId
    name: FilterName
    user_ids: frozenset[UserId] = frozenset()
    tag_ids: frozenset[TagId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
