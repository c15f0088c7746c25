"""Album session.

The single entry point a presentation layer talks to: it answers list
queries from the page cache or the album service, exposes the visible
albums in ranked order, and forwards votes and deletes to the mutation
coordinator.

Queries are not gated. Each one takes a sequence number and only the most
recent query may change visible state; an older response that resolves
late is cached under its own filter and otherwise ignored.
"""

from typing import Optional

import logfire

from vinyl.adapter.error import AdapterError
from vinyl.application.coordinator import MutationCoordinator
from vinyl.application.state import AlbumState
from vinyl.application.usecase.album import ListAlbumsRequest, ListAlbumsUseCase
from vinyl.domain.error import DomainError, ValidationError
from vinyl.domain.model.album import Album
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.repository import AlbumPageCache
from vinyl.domain.service import rank_albums, tally_votes
from vinyl.domain.value import AlbumFilter, AlbumId, SessionStatus, VoteTally, VoteType

FETCH_FAILED = "Failed to fetch albums"


class AlbumSession:
    """Query state and operations for one client session."""

    def __init__(
        self,
        state: AlbumState,
        page_cache: AlbumPageCache,
        list_albums_use_case: ListAlbumsUseCase,
        coordinator: MutationCoordinator,
    ) -> None:
        """Initialize album session.

        Args:
            state: Visible album state
            page_cache: Page cache consulted before every fetch
            list_albums_use_case: Fetches and caches pages
            coordinator: Runs votes and deletes
        """
        self.state = state
        self.page_cache = page_cache
        self.list_albums_use_case = list_albums_use_case
        self.coordinator = coordinator
        self._query_sequence = 0

    # Read-only view -------------------------------------------------

    @property
    def albums(self) -> list[Album]:
        """Visible albums, ranked by net score then title."""
        return rank_albums(self.state.albums)

    @property
    def raw_albums(self) -> list[Album]:
        """Visible albums in the order the service returned them."""
        return list(self.state.albums)

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def loading(self) -> bool:
        return self.state.status == SessionStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def search_query(self) -> str:
        return self.state.search_query

    @property
    def total_pages(self) -> int:
        return self.state.total_pages

    @property
    def total_count(self) -> int:
        return self.state.total_count

    @property
    def current_filter(self) -> AlbumFilter:
        return AlbumFilter(page=self.state.current_page, search=self.state.search_query)

    @property
    def votes_in_flight(self) -> frozenset[AlbumId]:
        return self.coordinator.votes_in_flight

    def is_voting(self, album_id: AlbumId) -> bool:
        return self.coordinator.is_voting(album_id)

    def tally(self, album_id: AlbumId) -> Optional[VoteTally]:
        """Vote tally of a visible album, None if it is not visible."""
        album = self.state.find(album_id)
        return tally_votes(album.votes) if album else None

    # Query inputs ---------------------------------------------------

    def update_search(self, text: str) -> None:
        """Set the search text for the next query; a new search starts at page 1."""
        self.state.search_query = text
        self.state.current_page = 1

    def go_to_page(self, page: int) -> None:
        """Set the page for the next query.

        Raises:
            ValidationError: If page is below 1
        """
        if page < 1:
            raise ValidationError(f"Page must be at least 1, got {page}")
        self.state.current_page = page

    # Operations -----------------------------------------------------

    async def query(self, album_filter: AlbumFilter | None = None) -> Optional[AlbumPage]:
        """Show the albums for a filter.

        Serves from the page cache when possible, otherwise fetches from
        the album service. Failures are recorded in ``error`` and never
        raised; the previously visible albums stay as they were.

        ``current_page`` and ``search_query`` take the filter's values only
        once its page is shown, so after a failed fetch they still describe
        the visible albums.

        Args:
            album_filter: Filter to show; defaults to the current page and
                search text

        Returns:
            The page shown, or None if the fetch failed
        """
        album_filter = album_filter or self.current_filter

        self._query_sequence += 1
        sequence = self._query_sequence

        cached = self.page_cache.get(album_filter)
        if cached is not None:
            logfire.info("Album page served from cache", cache_key=album_filter.cache_key)
            self._show(album_filter, cached)
            return cached

        self.state.start_loading()
        try:
            response = await self.list_albums_use_case.execute(
                ListAlbumsRequest(page=album_filter.page, search=album_filter.search)
            )
        except (DomainError, AdapterError) as e:
            if sequence != self._query_sequence:
                logfire.info(
                    "Ignoring failure of superseded query",
                    cache_key=album_filter.cache_key,
                    error=str(e),
                )
                return None
            self.state.fail(str(e) or FETCH_FAILED)
            logfire.warn(
                "Album query failed",
                cache_key=album_filter.cache_key,
                error=self.state.error,
                error_type=type(e).__name__,
            )
            return None

        if sequence != self._query_sequence:
            logfire.info(
                "Discarding response of superseded query",
                cache_key=album_filter.cache_key,
            )
            return response.page

        self._show(album_filter, response.page)
        return response.page

    def _show(self, album_filter: AlbumFilter, page: AlbumPage) -> None:
        self.state.show_page(page)
        self.state.current_page = album_filter.page
        self.state.search_query = album_filter.search

    async def vote(self, album_id: AlbumId, vote_type: VoteType | str) -> bool:
        """Vote on an album. See MutationCoordinator.vote."""
        return await self.coordinator.vote(album_id, vote_type)

    async def delete(self, album_id: AlbumId) -> None:
        """Delete an album. See MutationCoordinator.delete."""
        await self.coordinator.delete(album_id)

    def clear_cache(self) -> None:
        """Drop every cached page so the next query refetches."""
        self.page_cache.clear()
        logfire.info("Album page cache cleared")
