"""In-memory repository implementations for testing."""

from .filter import InMemoryFilterRepository
from .follow import InMemoryFollowRepository
from .freet import InMemoryFreetRepository
from .reference_link import InMemoryReferenceLinkRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryFilterRepository",
    "InMemoryFollowRepository",
    "InMemoryFreetRepository",
    "InMemoryReferenceLinkRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
