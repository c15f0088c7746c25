"""In-memory album page cache."""

from collections import OrderedDict
from typing import Optional

from vinyl.domain.model.page import AlbumPage
from vinyl.domain.repository.page_cache import AlbumPageCache
from vinyl.domain.value import AlbumFilter


class InMemoryAlbumPageCache(AlbumPageCache):
    """In-memory implementation of AlbumPageCache.

    Unbounded by default. With ``max_entries`` set, the least recently used
    filter is evicted once the bound is reached. Eviction never replaces the
    wholesale ``clear`` that mutations rely on.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._pages: OrderedDict[str, AlbumPage] = OrderedDict()
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def get(self, album_filter: AlbumFilter) -> Optional[AlbumPage]:
        """Find the page stored for a filter."""
        key = album_filter.cache_key
        page = self._pages.get(key)
        if page is not None and self.max_entries is not None:
            self._pages.move_to_end(key)
        return page

    def put(self, album_filter: AlbumFilter, page: AlbumPage) -> None:
        """Store a page for a filter."""
        key = album_filter.cache_key
        self._pages[key] = page
        self._pages.move_to_end(key)

        if self.max_entries is not None:
            while len(self._pages) > self.max_entries:
                self._pages.popitem(last=False)

    def clear(self) -> None:
        """Drop every stored page."""
        self._pages.clear()
        self._generation += 1

    def __len__(self) -> int:
        return len(self._pages)
