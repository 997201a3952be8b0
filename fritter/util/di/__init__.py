"""Dependency injection module."""

from fritter.util.di.application import ProdApplicationProvider
from fritter.util.di.base import Component, ProviderBase
from fritter.util.di.core import ProdConfigProvider
from fritter.util.di.domain import ProdDomainProvider
from fritter.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swapped for in-memory repositories in tests
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Components that have an in-memory implementation registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
