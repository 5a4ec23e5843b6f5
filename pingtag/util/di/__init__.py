"""Dependency injection module.

Providers come in two kinds. Concrete providers (config, domain,
application) are used as they are. Component providers such as
``PersistenceProvider`` are bases whose subclasses are the swappable
implementations, told apart by ``__is_mock__``.
"""

from typing import Type

from pingtag.util.di.application import ProdApplicationProvider
from pingtag.util.di.base import Component, DependencyInjectionError, ProviderBase
from pingtag.util.di.core import ProdConfigProvider
from pingtag.util.di.domain import ProdDomainProvider
from pingtag.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable
    PersistenceProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` has swappable implementations."""
    return bool(base.__subclasses__())


def component_names() -> set[str]:
    """Names of every swappable component in PROVIDERS."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if is_component(base) and base.__mock_component__
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock implementation of a component

    Returns:
        ``base`` itself for concrete providers, otherwise the matching subclass

    Raises:
        DependencyInjectionError: If the component lacks the requested kind
    """
    if not is_component(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {name}")


__all__ = [
    "Component",
    "DependencyInjectionError",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "component_names",
    "get_provider",
    "is_component",
]
