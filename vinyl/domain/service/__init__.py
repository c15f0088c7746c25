"""Domain services."""

from .authority import AlbumAuthority
from .identity import IdentityProvider
from .ranking import rank_albums, title_collation_key
from .tally import tally_votes

__all__ = [
    "AlbumAuthority",
    "IdentityProvider",
    "rank_albums",
    "tally_votes",
    "title_collation_key",
]
