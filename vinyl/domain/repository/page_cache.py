"""Album page cache interface."""

from abc import ABC, abstractmethod
from typing import Optional

from vinyl.domain.model.page import AlbumPage
from vinyl.domain.value import AlbumFilter


class AlbumPageCache(ABC):
    """Cache of album pages keyed by filter.

    Lookups match the filter's canonical key exactly. Entries never expire;
    they are dropped only by ``clear``, which every mutation calls.
    Methods are synchronous so a clear can never interleave with a lookup.
    """

    @abstractmethod
    def get(self, album_filter: AlbumFilter) -> Optional[AlbumPage]:
        """Find the page stored for a filter.

        Args:
            album_filter: Query filter

        Returns:
            The stored page if present, None otherwise
        """
        pass

    @abstractmethod
    def put(self, album_filter: AlbumFilter, page: AlbumPage) -> None:
        """Store a page, replacing any page stored for the same filter.

        Args:
            album_filter: Filter the page was fetched under
            page: Page returned by the album service
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every stored page and bump ``generation``."""
        pass

    @property
    @abstractmethod
    def generation(self) -> int:
        """Number of times the cache has been cleared.

        Lets a fetch that spans an await tell whether a mutation cleared
        the cache while it was waiting.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
