"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from vinyl.application.usecase.base import BaseUseCase
from vinyl.domain.model.vote import Vote
from vinyl.domain.service import AlbumAuthority, IdentityProvider
from vinyl.domain.service.tally import tally_votes
from vinyl.domain.value import AlbumId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    album_id: AlbumId
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    album_id: AlbumId
    votes: list[Vote]  # Full vote set of the album after the vote


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting an album up or down."""

    def __init__(self, authority: AlbumAuthority, identity: IdentityProvider) -> None:
        """Initialize cast vote use case.

        Args:
            authority: Album service
            identity: Source of bearer and anti-forgery tokens
        """
        self.authority = authority
        self.identity = identity

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Album and vote direction

        Returns:
            The album's authoritative vote set

        Raises:
            NotFoundError: If the album no longer exists
            UnauthorizedError: If the credential is rejected
            TransportError: If the service cannot be reached
        """
        with logfire.span(
            "cast_vote.execute",
            album_id=str(request.album_id),
            vote_type=request.vote_type.value,
        ):
            votes = await self.authority.cast_vote(
                album_id=request.album_id,
                vote_type=request.vote_type,
                bearer_token=self.identity.bearer_token(),
                csrf_token=self.identity.csrf_token(),
            )

            tally = tally_votes(votes)
            logfire.info(
                "Vote cast",
                album_id=str(request.album_id),
                up=tally.up,
                down=tally.down,
            )

            return CastVoteResponse(album_id=request.album_id, votes=votes)
