"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. A concern whose provider class
has subclasses is mockable: the subclass flagged ``__is_mock__`` backs the
tests, the other one production.
"""

from typing import Type

from deliberate.util.di.application import ProdApplicationProvider
from deliberate.util.di.base import Component, ProviderBase
from deliberate.util.di.core import ProdConfigProvider
from deliberate.util.di.domain import ProdDomainProvider
from deliberate.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the concerns that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a concern.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Whether the mock implementation is wanted

    Returns:
        ``base`` itself for concrete concerns, else the matching subclass

    Raises:
        ValueError: If the concern has no implementation of the wanted kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
