"""Identity infrastructure providers."""

import httpx
from dishka import Scope, provide

from vinyl.adapter.identity.session import CookieIdentityProvider
from vinyl.config import Settings
from vinyl.domain.service import IdentityProvider
from vinyl.util.di.base import ProviderBase


class CredentialsProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"

    # Reads the anti-forgery cookie from the real HTTP client's jar
    __depends_on__ = {"api"}


class ProdCredentialsProvider(CredentialsProvider):
    """Production identity provider backed by the client cookie jar."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity(
        self, settings: Settings, client: httpx.AsyncClient
    ) -> IdentityProvider:
        """Provide the session identity.

        Starts signed in when a token is configured.
        """
        return CookieIdentityProvider(
            cookies=client.cookies,
            csrf_cookie_name=settings.csrf.cookie_name,
            token=settings.identity.token,
        )
