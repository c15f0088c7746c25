"""Session identity backed by the HTTP client's cookie jar.

The album service hands out its anti-forgery token as a cookie and
URL-encodes the value, so it must be decoded before being echoed back in
the request header.
"""

from urllib.parse import unquote

import httpx
import logfire

from vinyl.domain.model.user import User
from vinyl.domain.service.identity import IdentityProvider
from vinyl.domain.value import UserId


class CookieIdentityProvider(IdentityProvider):
    """Identity for one client session.

    Holds the bearer token and user handed over by the sign-in flow and
    reads the anti-forgery token from the cookie jar shared with the album
    service client.
    """

    def __init__(
        self,
        cookies: httpx.Cookies,
        csrf_cookie_name: str,
        token: str | None = None,
        user: User | None = None,
    ) -> None:
        """Initialize cookie-backed identity.

        Args:
            cookies: Cookie jar of the album service client
            csrf_cookie_name: Name of the anti-forgery cookie
            token: Bearer token to start with, if already signed in
            user: Signed-in user, if known
        """
        self.cookies = cookies
        self.csrf_cookie_name = csrf_cookie_name
        self._token = token
        self._user = user

    def sign_in(self, token: str, user: User | None = None) -> None:
        """Adopt the credential produced by a successful sign-in."""
        self._token = token
        self._user = user
        logfire.info(
            "Session signed in", user_id=str(user.id) if user else None
        )

    def sign_out(self) -> None:
        """Forget the credential and user."""
        self._token = None
        self._user = None
        logfire.info("Session signed out")

    def current_user(self) -> User | None:
        return self._user

    def bearer_token(self) -> str | None:
        return self._token

    def csrf_token(self) -> str:
        """Read and URL-decode the anti-forgery cookie.

        Returns:
            Decoded token, or an empty string when the cookie is absent
        """
        # Cookies.get raises CookieConflict when several domains set the
        # same name, so walk the jar and take the first match
        for cookie in self.cookies.jar:
            if cookie.name == self.csrf_cookie_name and cookie.value:
                return unquote(cookie.value)
        return ""


class MockIdentityProvider(IdentityProvider):
    """Mock identity for testing.

    Always signed in as an admin with fixed tokens.
    """

    def __init__(
        self,
        token: str | None = "mock-token",
        csrf: str = "mock-csrf-token",
        user: User | None = None,
    ) -> None:
        self.token = token
        self.csrf = csrf
        self.user = user or User(
            id=UserId(1), name="Mock User", email="mock@example.com", role="admin"
        )

    def current_user(self) -> User | None:
        return self.user if self.token else None

    def bearer_token(self) -> str | None:
        return self.token

    def csrf_token(self) -> str:
        return self.csrf
