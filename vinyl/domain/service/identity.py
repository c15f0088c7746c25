"""Identity provider interface."""

from vinyl.domain.model.user import User


class IdentityProvider:
    """Source of the signed-in user's identity and request credentials."""

    def current_user(self) -> User | None:
        """Return the signed-in user, if any."""
        raise NotImplementedError

    def bearer_token(self) -> str | None:
        """Return the bearer token sent on every request."""
        raise NotImplementedError

    def csrf_token(self) -> str:
        """Return the anti-forgery token, or an empty string if absent."""
        raise NotImplementedError

    @property
    def is_authenticated(self) -> bool:
        return bool(self.bearer_token())
