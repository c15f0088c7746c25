"""Album service infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from vinyl.adapter.api.client import RealAlbumAuthority
from vinyl.config import CSRFSettings, Settings
from vinyl.domain.service import AlbumAuthority
from vinyl.util.di.base import ProviderBase


class ApiProvider(ProviderBase):
    """Album service component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production album service provider over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(self, settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the HTTP client for the album service.

        The client's cookie jar carries the anti-forgery cookie, so the
        same client must serve every request of the session. It is closed
        when the container closes.
        """
        async with httpx.AsyncClient(
            base_url=settings.api.base_url,
            timeout=settings.api.timeout,
        ) as client:
            logfire.info("Album service client opened", base_url=settings.api.base_url)
            yield client
        logfire.info("Album service client closed")

    @provide(scope=Scope.APP)
    def get_album_authority(
        self, client: httpx.AsyncClient, csrf: CSRFSettings
    ) -> AlbumAuthority:
        """Provide the HTTP album authority."""
        return RealAlbumAuthority(client=client, csrf=csrf)
