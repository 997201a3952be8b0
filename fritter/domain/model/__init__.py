"""Domain model entities for Fritter."""

from fritter.domain.model.filter import Filter
from fritter.domain.model.follow import Follow, FollowTarget, TagTarget, UserTarget
from fritter.domain.model.freet import Freet
from fritter.domain.model.reference_link import ReferenceLink
from fritter.domain.model.tag import Tag
from fritter.domain.model.user import User
from fritter.domain.model.vote import Vote

__all__ = [
    "User",
    "Tag",
    "Freet",
    "Vote",
    "ReferenceLink",
    "Follow",
    "FollowTarget",
    "UserTarget",
    "TagTarget",
    "Filter",
]
