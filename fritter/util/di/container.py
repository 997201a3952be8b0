"""Dependency injection container."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from fritter.util.di import PROVIDERS, Component


def build_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build a container, using in-memory implementations for ``mocked``.

    Settings are read from the environment by the config provider.
    """
    mocked = set(mocked)
    providers = [
        base.implementation(mocked=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # FastapiProvider exposes the Request to request-scoped providers
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Production container: PostgreSQL persistence."""
    return build_container()
