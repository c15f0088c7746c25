"""Domain model entities for Vinyl."""

from vinyl.domain.model.album import Album
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.model.user import User
from vinyl.domain.model.vote import Vote

__all__ = [
    "Album",
    "AlbumPage",
    "User",
    "Vote",
]
