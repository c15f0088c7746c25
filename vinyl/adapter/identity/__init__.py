"""Session identity adapter."""

from .session import CookieIdentityProvider, MockIdentityProvider

__all__ = [
    "CookieIdentityProvider",
    "MockIdentityProvider",
]
