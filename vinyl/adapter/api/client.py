"""Album service client implementations.

Talks to the album service's JSON API:

    GET    api/albums?page=<n>&search=<text>
    POST   api/albums/<id>/vote   {"vote": "up" | "down"}
    DELETE api/albums/<id>

Every request carries the bearer token; mutating requests also echo the
anti-forgery token from the session cookie.
"""

import asyncio
import math
from datetime import datetime
from typing import Any

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vinyl.adapter.error import AuthorityError, ProviderError, TransportError
from vinyl.config import CSRFSettings
from vinyl.domain.error import (
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from vinyl.domain.model.album import Album
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.model.vote import Vote
from vinyl.domain.service.authority import AlbumAuthority
from vinyl.domain.value import AlbumId, UserId, VoteId, VoteType

# Status the service uses when the anti-forgery token is missing or stale
CSRF_MISMATCH_STATUS = 419


class VoteResult(BaseModel):
    """Vote endpoint response body."""

    success: bool = True
    votes: list[Vote]


class RealAlbumAuthority(AlbumAuthority):
    """Album authority backed by the HTTP API."""

    def __init__(self, client: httpx.AsyncClient, csrf: CSRFSettings) -> None:
        """Initialize the HTTP album authority.

        Args:
            client: HTTP client whose base_url points at the album service
            csrf: Anti-forgery header configuration
        """
        self.client = client
        self.csrf = csrf

    def _headers(
        self, bearer_token: str | None, csrf_token: str | None = None
    ) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        if csrf_token is not None:
            headers[self.csrf.header_name] = csrf_token
        return headers

    async def list_albums(
        self, page: int, search: str, bearer_token: str | None
    ) -> AlbumPage:
        """Fetch one page of albums."""
        response = await self._request(
            "GET",
            "api/albums",
            failure_message="Failed to fetch albums",
            params={"page": str(page), "search": search},
            headers=self._headers(bearer_token),
        )
        return self._parse(AlbumPage, response)

    async def cast_vote(
        self,
        album_id: AlbumId,
        vote_type: VoteType,
        bearer_token: str | None,
        csrf_token: str,
    ) -> list[Vote]:
        """Cast a vote and return the album's full vote set."""
        response = await self._request(
            "POST",
            f"api/albums/{album_id}/vote",
            failure_message="Failed to vote",
            album_id=album_id,
            json={"vote": vote_type.value},
            headers=self._headers(bearer_token, csrf_token),
        )
        return self._parse(VoteResult, response).votes

    async def delete_album(
        self, album_id: AlbumId, bearer_token: str | None, csrf_token: str
    ) -> None:
        """Delete an album."""
        await self._request(
            "DELETE",
            f"api/albums/{album_id}",
            failure_message="Failed to delete album",
            album_id=album_id,
            headers=self._headers(bearer_token, csrf_token),
        )

    async def _request(
        self,
        method: str,
        url: str,
        failure_message: str,
        album_id: AlbumId | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and translate failures into domain errors.

        Raises:
            TransportError: If the request never got a response
            ProviderError: If the response could not be decoded or
                redirected endlessly
            UnauthorizedError, ForbiddenError, NotFoundError, ValidationError:
                For the matching error statuses
            AuthorityError: For any other non-2xx status
        """
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logfire.warn(
                "Album service unreachable",
                method=method,
                url=url,
                error=str(e),
            )
            raise TransportError(f"{failure_message}: {e}") from e
        except httpx.RequestError as e:
            # Undecodable bodies and redirect loops
            logfire.warn(
                "Album service response unusable",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ProviderError(f"{failure_message}: {e}") from e

        if response.is_success:
            return response

        message = _error_message(response, failure_message)
        logfire.warn(
            "Album service rejected request",
            method=method,
            url=url,
            status_code=response.status_code,
            message=message,
        )

        status = response.status_code
        if status == 401:
            raise UnauthorizedError(message)
        if status in (403, CSRF_MISMATCH_STATUS):
            raise ForbiddenError(message)
        if status == 404:
            raise NotFoundError("Album", str(album_id) if album_id else url)
        if status == 422:
            raise ValidationError(message)
        raise AuthorityError(message, status_code=status)

    @staticmethod
    def _parse(model: type[BaseModel], response: httpx.Response) -> Any:
        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise ProviderError(f"Malformed response from album service: {e}") from e


def _error_message(response: httpx.Response, default: str) -> str:
    """Pull the service's ``message`` field out of an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"] or default
    return default


class MockAlbumAuthority(AlbumAuthority):
    """In-memory album authority for testing.

    Behaves like the service for a single acting user: paginates and
    searches albums, keeps one vote per user per album, and only lets
    admins delete. Records every call so tests can count round trips.
    """

    def __init__(
        self,
        albums: list[Album] | None = None,
        per_page: int = 10,
        acting_user_id: UserId = UserId(1),
        is_admin: bool = True,
    ) -> None:
        self.albums: dict[AlbumId, Album] = {a.id: a for a in albums or []}
        self.per_page = per_page
        self.acting_user_id = acting_user_id
        self.is_admin = is_admin
        self.calls: list[tuple[Any, ...]] = []
        self._failures: list[Exception] = []
        self._next_vote_id = 1

    def seed(self, *albums: Album) -> None:
        """Add or replace albums."""
        for album in albums:
            self.albums[album.id] = album

    def fail_next(self, error: Exception) -> None:
        """Make the next call raise ``error``."""
        self._failures.append(error)

    def call_count(self, operation: str) -> int:
        """Number of calls made to ``operation`` (e.g. "list_albums")."""
        return sum(1 for call in self.calls if call[0] == operation)

    def _begin(self, *call: Any, bearer_token: str | None) -> None:
        self.calls.append(call)
        if self._failures:
            raise self._failures.pop(0)
        if not bearer_token:
            raise UnauthorizedError("Unauthenticated.")

    async def list_albums(
        self, page: int, search: str, bearer_token: str | None
    ) -> AlbumPage:
        """Return a page of the stored albums, ordered by id."""
        self._begin("list_albums", page, search, bearer_token=bearer_token)
        await asyncio.sleep(0)

        needle = search.casefold()
        matches = [
            album
            for album in sorted(self.albums.values(), key=lambda a: a.id)
            if needle in album.title.casefold()
            or needle in album.artist_name.casefold()
        ]

        start = (page - 1) * self.per_page
        items = matches[start : start + self.per_page]

        return AlbumPage(
            items=items,
            page_number=page,
            last_page=max(1, math.ceil(len(matches) / self.per_page)),
            total_count=len(matches),
            per_page=self.per_page,
            from_item=start + 1 if items else None,
            to_item=start + len(items) if items else None,
        )

    async def cast_vote(
        self,
        album_id: AlbumId,
        vote_type: VoteType,
        bearer_token: str | None,
        csrf_token: str,
    ) -> list[Vote]:
        """Record the acting user's vote, replacing any earlier one."""
        self._begin("cast_vote", album_id, vote_type, bearer_token=bearer_token)
        if not csrf_token:
            raise ForbiddenError("CSRF token mismatch.")
        await asyncio.sleep(0)

        album = self.albums.get(album_id)
        if album is None:
            raise NotFoundError("Album", str(album_id))

        now = datetime.now()
        vote = Vote(
            id=VoteId(self._next_vote_id),
            album_id=album_id,
            user_id=self.acting_user_id,
            value=vote_type,
            created_at=now,
            updated_at=now,
        )
        self._next_vote_id += 1

        votes = [v for v in album.votes if v.user_id != self.acting_user_id]
        votes.append(vote)
        self.albums[album_id] = album.with_votes(votes)
        return list(votes)

    async def delete_album(
        self, album_id: AlbumId, bearer_token: str | None, csrf_token: str
    ) -> None:
        """Remove an album if the acting user is an admin."""
        self._begin("delete_album", album_id, bearer_token=bearer_token)
        if not csrf_token:
            raise ForbiddenError("CSRF token mismatch.")
        await asyncio.sleep(0)

        if not self.is_admin:
            raise ForbiddenError("Only admins can delete albums")
        if album_id not in self.albums:
            raise NotFoundError("Album", str(album_id))
        del self.albums[album_id]
