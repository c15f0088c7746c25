"""Application layer DI providers."""

from dishka import Scope, provide

from vinyl.application.coordinator import MutationCoordinator
from vinyl.application.session import AlbumSession
from vinyl.application.state import AlbumState
from vinyl.application.usecase.album import DeleteAlbumUseCase, ListAlbumsUseCase
from vinyl.application.usecase.vote import CastVoteUseCase
from vinyl.domain.repository import AlbumPageCache
from vinyl.domain.service import AlbumAuthority, IdentityProvider
from vinyl.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    Everything is APP-scoped: one container serves one client session, and
    the session, its state and its in-flight vote set must be shared by
    every caller.
    """

    scope = Scope.APP

    @provide
    def get_album_state(self) -> AlbumState:
        """Provide the session's visible album state."""
        return AlbumState()

    # Use cases
    @provide
    def get_list_albums_use_case(
        self,
        authority: AlbumAuthority,
        page_cache: AlbumPageCache,
        identity: IdentityProvider,
    ) -> ListAlbumsUseCase:
        """Provide list albums use case."""
        return ListAlbumsUseCase(
            authority=authority, page_cache=page_cache, identity=identity
        )

    @provide
    def get_cast_vote_use_case(
        self, authority: AlbumAuthority, identity: IdentityProvider
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(authority=authority, identity=identity)

    @provide
    def get_delete_album_use_case(
        self, authority: AlbumAuthority, identity: IdentityProvider
    ) -> DeleteAlbumUseCase:
        """Provide delete album use case."""
        return DeleteAlbumUseCase(authority=authority, identity=identity)

    # Session
    @provide
    def get_mutation_coordinator(
        self,
        state: AlbumState,
        page_cache: AlbumPageCache,
        cast_vote_use_case: CastVoteUseCase,
        delete_album_use_case: DeleteAlbumUseCase,
    ) -> MutationCoordinator:
        """Provide mutation coordinator."""
        return MutationCoordinator(
            state=state,
            page_cache=page_cache,
            cast_vote_use_case=cast_vote_use_case,
            delete_album_use_case=delete_album_use_case,
        )

    @provide
    def get_album_session(
        self,
        state: AlbumState,
        page_cache: AlbumPageCache,
        list_albums_use_case: ListAlbumsUseCase,
        coordinator: MutationCoordinator,
    ) -> AlbumSession:
        """Provide album session."""
        return AlbumSession(
            state=state,
            page_cache=page_cache,
            list_albums_use_case=list_albums_use_case,
            coordinator=coordinator,
        )
