"""Mutation coordinator.

Runs votes and deletes against the album service and folds the results
into the session's visible state.

At most one vote per album is outstanding at a time. A second vote for
the same album while the first is pending is dropped, so a double click
can never produce two responses that land out of order. Votes on
different albums run concurrently; each one only ever writes its own
album's vote set.

Every successful mutation clears the whole page cache: a vote changes
scores, and scores decide ranking on every cached page.
"""

import logfire
from pydantic import ValidationError as PydanticValidationError

from vinyl.adapter.error import AdapterError
from vinyl.application.state import AlbumState
from vinyl.application.usecase.album import DeleteAlbumRequest, DeleteAlbumUseCase
from vinyl.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from vinyl.domain.error import DomainError, ValidationError
from vinyl.domain.repository import AlbumPageCache
from vinyl.domain.value import AlbumId, VoteType

VOTE_FAILED = "Failed to vote"
DELETE_FAILED = "Failed to delete album"


class MutationCoordinator:
    """Gates and applies album mutations for one session."""

    def __init__(
        self,
        state: AlbumState,
        page_cache: AlbumPageCache,
        cast_vote_use_case: CastVoteUseCase,
        delete_album_use_case: DeleteAlbumUseCase,
    ) -> None:
        """Initialize mutation coordinator.

        Args:
            state: Visible album state to update
            page_cache: Page cache to clear after each mutation
            cast_vote_use_case: Vote use case
            delete_album_use_case: Delete use case
        """
        self.state = state
        self.page_cache = page_cache
        self.cast_vote_use_case = cast_vote_use_case
        self.delete_album_use_case = delete_album_use_case
        self._votes_in_flight: set[AlbumId] = set()

    @property
    def votes_in_flight(self) -> frozenset[AlbumId]:
        """Albums with a vote currently outstanding."""
        return frozenset(self._votes_in_flight)

    def is_voting(self, album_id: AlbumId) -> bool:
        return album_id in self._votes_in_flight

    async def vote(self, album_id: AlbumId, vote_type: VoteType | str) -> bool:
        """Vote on an album.

        Args:
            album_id: Album to vote on
            vote_type: "up" or "down"

        Returns:
            True if the vote was sent and applied, False if it was dropped
            because a vote for the same album was already outstanding

        Raises:
            ValidationError: If vote_type is not up or down or album_id is
                malformed; recorded like any other failure
            DomainError, AdapterError: If the album service call failed;
                the message is recorded in the session error first
        """
        if album_id in self._votes_in_flight:
            logfire.info("Vote already in flight, ignoring", album_id=str(album_id))
            return False

        self._votes_in_flight.add(album_id)
        self.state.error = None
        try:
            try:
                direction = VoteType(vote_type)
            except ValueError as e:
                raise ValidationError(f"Invalid vote value: {vote_type!r}") from e

            try:
                request = CastVoteRequest(album_id=album_id, vote_type=direction)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid album id: {album_id!r}") from e

            response = await self.cast_vote_use_case.execute(request)

            if not self.state.replace_votes(album_id, response.votes):
                logfire.info("Voted album not visible", album_id=str(album_id))
            self.page_cache.clear()
            return True
        except (DomainError, AdapterError) as e:
            self.state.error = str(e) or VOTE_FAILED
            logfire.warn(
                "Vote failed",
                album_id=str(album_id),
                error=self.state.error,
                error_type=type(e).__name__,
            )
            raise
        finally:
            self._votes_in_flight.discard(album_id)

    async def delete(self, album_id: AlbumId) -> None:
        """Delete an album.

        Not gated: a repeated delete is sent again and, once the album is
        gone, simply has nothing left to remove locally.

        Args:
            album_id: Album to delete

        Raises:
            ValidationError: If album_id is malformed; recorded like any
                other failure
            DomainError, AdapterError: If the album service call failed;
                the message is recorded in the session error first
        """
        try:
            try:
                request = DeleteAlbumRequest(album_id=album_id)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid album id: {album_id!r}") from e

            await self.delete_album_use_case.execute(request)
        except (DomainError, AdapterError) as e:
            self.state.error = str(e) or DELETE_FAILED
            logfire.warn(
                "Delete failed",
                album_id=str(album_id),
                error=self.state.error,
                error_type=type(e).__name__,
            )
            raise

        self.state.remove_album(album_id)
        self.page_cache.clear()
