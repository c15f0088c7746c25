"""Integration test for AlbumSession over the real HTTP stack.

This test demonstrates:
1. Using the real httpx client and cookie identity from the container
2. The anti-forgery cookie jar being shared between client and identity
3. Transport failures surfacing as the session error

No album service is needed: the client points at a closed local port.
"""

import httpx
import logfire
import pytest

from vinyl.adapter.api import RealAlbumAuthority
from vinyl.adapter.identity import CookieIdentityProvider
from vinyl.application.session import AlbumSession
from vinyl.domain.service import AlbumAuthority, IdentityProvider
from vinyl.domain.value import AlbumFilter, SessionStatus
from tests.harness import create_env_fixture

# Integration test fixture - real HTTP client and cookie identity
integration_env = create_env_fixture(unmock={"api", "identity"})


@pytest.fixture(autouse=True)
def closed_port(monkeypatch):
    """Point the client at a port nothing listens on."""
    monkeypatch.setenv("API__BASE_URL", "http://127.0.0.1:9/")
    monkeypatch.setenv("API__TIMEOUT", "2")
    monkeypatch.setenv("IDENTITY__TOKEN", "integration-token")
    yield


class TestHttpWiring:
    """Tests for the production adapters as assembled by the container."""

    @pytest.mark.asyncio
    async def test_resolves_real_adapters(self, integration_env):
        authority = await integration_env.get(AlbumAuthority)
        identity = await integration_env.get(IdentityProvider)

        assert isinstance(authority, RealAlbumAuthority)
        assert isinstance(identity, CookieIdentityProvider)
        assert identity.bearer_token() == "integration-token"

    @pytest.mark.asyncio
    async def test_identity_reads_client_cookie_jar(self, integration_env):
        """A cookie the service sets on the client is visible to the identity."""
        # Arrange
        client = await integration_env.get(httpx.AsyncClient)
        identity = await integration_env.get(IdentityProvider)

        # Act
        client.cookies.set("XSRF-TOKEN", "abc%3D", domain="127.0.0.1")

        # Assert
        assert identity.csrf_token() == "abc="

    @pytest.mark.asyncio
    async def test_unreachable_service_sets_error(self, integration_env):
        """A connection failure is recorded, not raised."""
        session = await integration_env.get(AlbumSession)

        page = await session.query(AlbumFilter(page=1))

        assert page is None
        assert session.status == SessionStatus.ERRORED
        assert session.error.startswith("Failed to fetch albums")
        assert session.albums == []

    @pytest.mark.asyncio
    async def test_building_client_does_not_instrument_httpx(
        self, integration_env, monkeypatch
    ):
        """Instrumentation happens once at startup, not per container."""
        # Arrange
        calls = []
        monkeypatch.setattr(logfire, "instrument_httpx", lambda *a, **kw: calls.append(a))

        # Act
        client = await integration_env.get(httpx.AsyncClient)

        # Assert
        assert isinstance(client, httpx.AsyncClient)
        assert calls == []
