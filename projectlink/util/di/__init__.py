"""Dependency injection wiring.

``PROVIDERS`` lists every provider family. Swappable components (see
``ProviderBase``) resolve to their production implementation unless named
in ``mocked``.
"""

from typing import Collection

from projectlink.util.di.application import ProdApplicationProvider
from projectlink.util.di.base import Component, ProviderBase
from projectlink.util.di.core import ProdConfigProvider
from projectlink.util.di.domain import ProdDomainProvider
from projectlink.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of components that can be swapped for test implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per family.

    Args:
        mocked: Components to take the test implementation for

    Returns:
        Provider instances ready for ``make_async_container``
    """
    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "PROVIDERS",
    "Component",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "build_providers",
    "mockable_components",
]
