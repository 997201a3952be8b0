"""Async PostgreSQL engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fritter.config import DatabaseSettings

APPLICATION_NAME = "fritter"


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine shared by the whole process."""
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions are only used for Core statements, so nothing expires or autoflushes."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
