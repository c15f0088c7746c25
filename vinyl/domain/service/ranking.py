"""Album ranking.

Albums are ordered by net score (up minus down), highest first. Albums
with the same score are ordered by title, compared the way a reader
would: accents and case are ignored first and only break ties after that.
Titles that differ only in case put lowercase first.
"""

import unicodedata
from typing import Sequence

from vinyl.domain.model.album import Album
from vinyl.domain.service.tally import tally_votes


def title_collation_key(title: str) -> tuple[str, str, str]:
    """Build a locale-independent collation key for a title.

    Args:
        title: Album title

    Returns:
        Tuple of (base letters, case-folded text, case-swapped text)
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base, folded, title.swapcase()


def rank_albums(albums: Sequence[Album]) -> list[Album]:
    """Rank albums by net score, then title.

    Returns a new list; the input is left untouched. The sort is stable,
    so albums with identical score and title keep their input order.

    Args:
        albums: Albums to rank

    Returns:
        Ranked albums
    """

    def sort_key(album: Album) -> tuple[int, tuple[str, str, str]]:
        return (-tally_votes(album.votes).net_score, title_collation_key(album.title))

    return sorted(albums, key=sort_key)
