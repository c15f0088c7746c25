"""Visible album state of one client session.

Shared by the query session and the mutation coordinator. Only code
running on the session's event loop reads or writes it.
"""

from typing import Optional

from vinyl.domain.model.album import Album
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.model.vote import Vote
from vinyl.domain.value import AlbumId, SessionStatus


class AlbumState:
    """Albums currently shown plus pagination, status and error."""

    def __init__(self) -> None:
        self.albums: list[Album] = []
        self.status = SessionStatus.IDLE
        self.error: Optional[str] = None
        self.current_page = 1
        self.search_query = ""
        self.total_pages = 0
        self.total_count = 0

    def show_page(self, page: AlbumPage) -> None:
        """Make a page the visible collection and mark the session ready."""
        self.albums = list(page.items)
        self.total_pages = page.last_page
        self.total_count = page.total_count
        self.status = SessionStatus.READY
        self.error = None

    def start_loading(self) -> None:
        self.status = SessionStatus.LOADING
        self.error = None

    def fail(self, message: str) -> None:
        """Record a failed fetch. Visible albums are left as they were."""
        self.status = SessionStatus.ERRORED
        self.error = message

    def find(self, album_id: AlbumId) -> Optional[Album]:
        for album in self.albums:
            if album.id == album_id:
                return album
        return None

    def replace_votes(self, album_id: AlbumId, votes: list[Vote]) -> bool:
        """Swap in the authoritative vote set for one album.

        Returns:
            True if the album is visible and was updated
        """
        for i, album in enumerate(self.albums):
            if album.id == album_id:
                self.albums[i] = album.with_votes(votes)
                return True
        return False

    def remove_album(self, album_id: AlbumId) -> bool:
        """Drop an album from the visible collection.

        Returns:
            True if the album was visible
        """
        remaining = [a for a in self.albums if a.id != album_id]
        removed = len(remaining) != len(self.albums)
        self.albums = remaining
        return removed
