"""Dependency injection module."""

from typing import Type

from threadline.util.di.application import ProdApplicationProvider
from threadline.util.di.base import Component, ProviderBase
from threadline.util.di.core import ProdConfigProvider
from threadline.util.di.domain import ProdDomainProvider
from threadline.util.di.infrastructure import (
    BackendProvider,
    PersistenceProvider,
    ProdBackendProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)
from threadline.util.error import ConfigurationError

# Concrete providers first, then the component bases whose implementation
# is picked per container
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    BackendProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    A base without subclasses is concrete and returned unchanged. Otherwise
    it is a component base, and the subclass whose ``__is_mock__`` matches
    ``use_mock`` is returned.

    Raises:
        ConfigurationError: If the component has no matching implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ConfigurationError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "BackendProvider",
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdBackendProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
