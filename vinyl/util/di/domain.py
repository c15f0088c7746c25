"""Domain layer DI providers."""

from dishka import Scope, provide

from vinyl.config import Settings
from vinyl.domain.repository import AlbumPageCache
from vinyl.persistence.cache import InMemoryAlbumPageCache
from vinyl.util.di.base import ProviderBase
from vinyl.util.error import ConfigurationError


class ProdDomainProvider(ProviderBase):
    """Production domain provider - concrete, no mocks needed.

    The page cache lives for the whole session (APP scope): every query
    and mutation of the session shares one cache.
    """

    scope = Scope.APP

    @provide
    def get_page_cache(self, settings: Settings) -> AlbumPageCache:
        """Provide the album page cache.

        Raises:
            ConfigurationError: If cache.max_entries is set below 1
        """
        max_entries = settings.cache.max_entries
        if max_entries is not None and max_entries < 1:
            raise ConfigurationError(
                f"cache.max_entries must be at least 1, got {max_entries}"
            )
        return InMemoryAlbumPageCache(max_entries=max_entries)
