"""Album service adapter."""

from .client import MockAlbumAuthority, RealAlbumAuthority, VoteResult

__all__ = [
    "MockAlbumAuthority",
    "RealAlbumAuthority",
    "VoteResult",
]
