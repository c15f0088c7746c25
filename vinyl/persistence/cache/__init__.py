"""Album page cache implementations."""

from .inmemory import InMemoryAlbumPageCache

__all__ = [
    "InMemoryAlbumPageCache",
]
