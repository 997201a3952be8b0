"""Strongly typed identifiers for Fritter domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
FreetId = NewType("FreetId", UUID)
TagId = NewType("TagId", UUID)
VoteId = NewType("VoteId", UUID)
ReferenceLinkId = NewType("ReferenceLinkId", UUID)
FollowId = NewType("FollowId", UUID)
FilterId = NewType("FilterId", UUID)
