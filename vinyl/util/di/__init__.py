"""Dependency injection module."""

from typing import Type

from vinyl.util.di.application import ProdApplicationProvider
from vinyl.util.di.base import Component, ProviderBase
from vinyl.util.di.core import ProdConfigProvider
from vinyl.util.di.domain import ProdDomainProvider
from vinyl.util.di.infrastructure import (
    ApiProvider,
    CredentialsProvider,
    ProdApiProvider,
    ProdCredentialsProvider,
)
from vinyl.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    ApiProvider,
    CredentialsProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider with no subclasses is concrete and used as-is. A provider
    with subclasses is a mockable component; the implementation is picked
    by its ``__is_mock__`` flag.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(f"No {kind} implementation for {component_name}")

    return impl


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
    "ApiProvider",
    "CredentialsProvider",
    # Infrastructure implementations
    "ProdApiProvider",
    "ProdCredentialsProvider",
]
