"""Repository interfaces for the Fritter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from fritter.domain.repository.filter import FilterRepository
from fritter.domain.repository.follow import FollowRepository
from fritter.domain.repository.freet import FreetRepository
from fritter.domain.repository.reference_link import ReferenceLinkRepository
from fritter.domain.repository.tag import TagRepository
from fritter.domain.repository.user import UserRepository
from fritter.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TagRepository",
    "FreetRepository",
    "VoteRepository",
    "ReferenceLinkRepository",
    "FollowRepository",
    "FilterRepository",
]
