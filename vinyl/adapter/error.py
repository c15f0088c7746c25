"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider returned something the client cannot use."""

    pass


class TransportError(AdapterError):
    """The album service could not be reached."""

    pass


class AuthorityError(ProviderError):
    """The album service answered with an unexpected error status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
