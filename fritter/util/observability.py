"""Logfire setup for the API process and migration scripts.

Services and use cases emit spans and events directly::

    with logfire.span("freet_service.create_freet", author_id=str(author_id)):
        ...
    logfire.info("Freet created", freet_id=str(freet.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from fritter.config import Settings

SERVICE_NAME = "fritter-backend"

# Polled constantly by the orchestrator
UNTRACED_URLS = ["/health"]


def should_send(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins, otherwise data is
    sent only when a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start."""
    send = should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    # Validated values include sign-in passwords
    return {
        "method": request.method,
        "path": request.url.path,
        "signed_in": "auth_token" in request.cookies,
        **{k: v for k, v in attributes.items() if k != "values"},
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except the liveness check."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
