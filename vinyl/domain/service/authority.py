"""Album authority interface.

The album service is the single source of truth for albums and votes.
Implementations live in the adapter layer.
"""

from vinyl.domain.model.page import AlbumPage
from vinyl.domain.model.vote import Vote
from vinyl.domain.value import AlbumId, VoteType


class AlbumAuthority:
    """Remote album service contract."""

    async def list_albums(
        self, page: int, search: str, bearer_token: str | None
    ) -> AlbumPage:
        """Fetch one page of albums.

        Args:
            page: 1-based page number
            search: Search text, empty for no filtering
            bearer_token: Credential of the signed-in user

        Returns:
            The requested page

        Raises:
            UnauthorizedError: If the credential is missing or invalid
            TransportError: If the service cannot be reached
        """
        raise NotImplementedError

    async def cast_vote(
        self,
        album_id: AlbumId,
        vote_type: VoteType,
        bearer_token: str | None,
        csrf_token: str,
    ) -> list[Vote]:
        """Cast the user's vote on an album.

        Args:
            album_id: Album to vote on
            vote_type: Up or down
            bearer_token: Credential of the signed-in user
            csrf_token: Anti-forgery token echoed from the session cookie

        Returns:
            The album's full vote set after the vote

        Raises:
            NotFoundError: If the album no longer exists
            UnauthorizedError: If the credential is missing or invalid
            TransportError: If the service cannot be reached
        """
        raise NotImplementedError

    async def delete_album(
        self, album_id: AlbumId, bearer_token: str | None, csrf_token: str
    ) -> None:
        """Delete an album.

        Args:
            album_id: Album to delete
            bearer_token: Credential of the signed-in user
            csrf_token: Anti-forgery token echoed from the session cookie

        Raises:
            ForbiddenError: If the user may not delete albums
            NotFoundError: If the album no longer exists
            TransportError: If the service cannot be reached
        """
        raise NotImplementedError
