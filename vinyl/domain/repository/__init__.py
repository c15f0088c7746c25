"""Repository interfaces for domain entities."""

from .page_cache import AlbumPageCache

__all__ = [
    "AlbumPageCache",
]
