"""List albums use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vinyl.application.usecase.base import BaseUseCase
from vinyl.domain.error import ValidationError
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.repository import AlbumPageCache
from vinyl.domain.service import AlbumAuthority, IdentityProvider
from vinyl.domain.value import AlbumFilter


class ListAlbumsRequest(BaseModel):
    """List albums request."""

    page: int = 1
    search: str = ""


class ListAlbumsResponse(BaseModel):
    """List albums response."""

    album_filter: AlbumFilter
    page: AlbumPage
    cached: bool  # Whether the page was stored in the page cache


class ListAlbumsUseCase(BaseUseCase[ListAlbumsRequest, ListAlbumsResponse]):
    """Use case for fetching a page of albums and caching it."""

    def __init__(
        self,
        authority: AlbumAuthority,
        page_cache: AlbumPageCache,
        identity: IdentityProvider,
    ) -> None:
        """Initialize list albums use case.

        Args:
            authority: Album service
            page_cache: Page cache to populate
            identity: Source of the bearer token
        """
        self.authority = authority
        self.page_cache = page_cache
        self.identity = identity

    async def execute(self, request: ListAlbumsRequest) -> ListAlbumsResponse:
        """Execute list albums flow.

        Always goes to the album service; cache lookups are the caller's
        job. The fetched page is cached under its filter unless the cache
        was cleared while the request was in flight, since a mutation in
        that window may have made the page stale.

        Args:
            request: Page number and search text

        Returns:
            Fetched page

        Raises:
            ValidationError: If page or search is malformed
            UnauthorizedError: If the credential is rejected
            TransportError: If the service cannot be reached
        """
        try:
            album_filter = AlbumFilter(page=request.page, search=request.search)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid album filter: {e}") from e

        with logfire.span(
            "list_albums.execute",
            page=album_filter.page,
            search=album_filter.search,
        ):
            generation = self.page_cache.generation

            page = await self.authority.list_albums(
                page=album_filter.page,
                search=album_filter.search,
                bearer_token=self.identity.bearer_token(),
            )

            cached = self.page_cache.generation == generation
            if cached:
                self.page_cache.put(album_filter, page)
            else:
                logfire.info(
                    "Page cache cleared during fetch, not caching",
                    cache_key=album_filter.cache_key,
                )

            logfire.info(
                "Albums listed",
                count=len(page.items),
                total=page.total_count,
                cached=cached,
            )

            return ListAlbumsResponse(album_filter=album_filter, page=page, cached=cached)
