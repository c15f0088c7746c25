"""Album use cases."""

from .delete_album import DeleteAlbumRequest, DeleteAlbumResponse, DeleteAlbumUseCase
from .list_albums import ListAlbumsRequest, ListAlbumsResponse, ListAlbumsUseCase

__all__ = [
    "DeleteAlbumRequest",
    "DeleteAlbumResponse",
    "DeleteAlbumUseCase",
    "ListAlbumsRequest",
    "ListAlbumsResponse",
    "ListAlbumsUseCase",
]
