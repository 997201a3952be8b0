"""Standard library logging for third-party loggers.

Application events go through logfire; this only decides how chatty the
libraries underneath are.
"""

import logging
import sys

from fritter.config import Settings

# Loggers that stay at WARNING unless debugging
NOISY_LOGGERS = ("passlib", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings.debug``."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    quiet = logging.DEBUG if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    # SQL echo is handled by the engine's echo flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
