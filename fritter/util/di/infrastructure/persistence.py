"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fritter.config import Settings
from fritter.domain.repository import (
    FilterRepository,
    FollowRepository,
    FreetRepository,
    ReferenceLinkRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from fritter.persistence.database import create_engine, create_session_factory
from fritter.persistence.repository import (
    PostgresFilterRepository,
    PostgresFollowRepository,
    PostgresFreetRepository,
    PostgresReferenceLinkRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from fritter.util.di.base import ProviderBase
from fritter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Cascading deletes of one
        request therefore land together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_freet_repository(self, session: AsyncSession) -> FreetRepository:
        """Provide Freet repository."""
        return PostgresFreetRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reference_link_repository(
        self, session: AsyncSession
    ) -> ReferenceLinkRepository:
        """Provide ReferenceLink repository."""
        return PostgresReferenceLinkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_filter_repository(self, session: AsyncSession) -> FilterRepository:
        """Provide Filter repository."""
        return PostgresFilterRepository(session)
