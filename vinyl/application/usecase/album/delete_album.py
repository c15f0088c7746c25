"""Delete album use case."""

import logfire
from pydantic import BaseModel

from vinyl.application.usecase.base import BaseUseCase
from vinyl.domain.service import AlbumAuthority, IdentityProvider
from vinyl.domain.value import AlbumId


class DeleteAlbumRequest(BaseModel):
    """Delete album request."""

    album_id: AlbumId


class DeleteAlbumResponse(BaseModel):
    """Delete album response."""

    album_id: AlbumId
    success: bool
    message: str


class DeleteAlbumUseCase(BaseUseCase[DeleteAlbumRequest, DeleteAlbumResponse]):
    """Use case for deleting an album."""

    def __init__(self, authority: AlbumAuthority, identity: IdentityProvider) -> None:
        """Initialize delete album use case.

        Args:
            authority: Album service
            identity: Source of bearer and anti-forgery tokens
        """
        self.authority = authority
        self.identity = identity

    async def execute(self, request: DeleteAlbumRequest) -> DeleteAlbumResponse:
        """Execute delete album flow.

        Args:
            request: Album to delete

        Returns:
            Confirmation

        Raises:
            ForbiddenError: If the user may not delete albums
            NotFoundError: If the album no longer exists
            TransportError: If the service cannot be reached
        """
        with logfire.span("delete_album.execute", album_id=str(request.album_id)):
            await self.authority.delete_album(
                album_id=request.album_id,
                bearer_token=self.identity.bearer_token(),
                csrf_token=self.identity.csrf_token(),
            )

            logfire.info("Album deleted", album_id=str(request.album_id))

            return DeleteAlbumResponse(
                album_id=request.album_id,
                success=True,
                message="Album deleted successfully",
            )
