"""Domain value objects for Fritter."""

from fritter.domain.value.identifiers import (
    FilterId,
    FollowId,
    FreetId,
    ReferenceLinkId,
    TagId,
    UserId,
    VoteId,
)
from fritter.domain.value.types import (
    FilterName,
    FollowTargetKind,
    TagName,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "FreetId",
    "TagId",
    "VoteId",
    "ReferenceLinkId",
    "FollowId",
    "FilterId",
    # Types
    "Username",
    "TagName",
    "FilterName",
    "FollowTargetKind",
]
