"""Infrastructure providers."""

# Import bases
from .api import ApiProvider
from .identity import CredentialsProvider

# Import implementations (needed for __subclasses__())
from .api import ProdApiProvider  # noqa: F401
from .identity import ProdCredentialsProvider  # noqa: F401

__all__ = [
    "ApiProvider",
    "CredentialsProvider",
    "ProdApiProvider",
    "ProdCredentialsProvider",
]
