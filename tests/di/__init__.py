"""Mock providers for testing."""

from .api import MockApiProvider
from .identity import MockCredentialsProvider
from .container import build_test_container

__all__ = [
    "MockApiProvider",
    "MockCredentialsProvider",
    "build_test_container",
]
