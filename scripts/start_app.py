#!/usr/bin/env python3
"""Serve the Fritter API with uvicorn.

Logfire is configured before the app module is imported so that failures
while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from fritter.config import Settings
from fritter.util.logging import setup_logging
from fritter.util.observability import configure_logfire

APP = "fritter.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Fritter API",
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Fritter API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
