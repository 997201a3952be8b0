"""PostgreSQL repository implementations."""

from fritter.persistence.repository.filter import PostgresFilterRepository
from fritter.persistence.repository.follow import PostgresFollowRepository
from fritter.persistence.repository.freet import PostgresFreetRepository
from fritter.persistence.repository.reference_link import (
    PostgresReferenceLinkRepository,
)
from fritter.persistence.repository.tag import PostgresTagRepository
from fritter.persistence.repository.user import PostgresUserRepository
from fritter.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTagRepository",
    "PostgresFreetRepository",
    "PostgresVoteRepository",
    "PostgresReferenceLinkRepository",
    "PostgresFollowRepository",
    "PostgresFilterRepository",
]
