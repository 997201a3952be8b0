#!/usr/bin/env python3
"""Upgrade the Fritter database schema to the latest Alembic revision."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from fritter.config import Settings
from fritter.util.logging import setup_logging
from fritter.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Run migrations up to a revision and report failures to Logfire.

    Args:
        revision: Target Alembic revision
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The container must not start on a broken schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
