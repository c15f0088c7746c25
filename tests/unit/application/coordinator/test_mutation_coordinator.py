"""Unit tests for MutationCoordinator."""

import asyncio

import pytest

from vinyl.adapter.api import MockAlbumAuthority
from vinyl.adapter.error import TransportError
from vinyl.adapter.identity import MockIdentityProvider
from vinyl.application.coordinator import MutationCoordinator
from vinyl.application.state import AlbumState
from vinyl.application.usecase.album import DeleteAlbumUseCase
from vinyl.application.usecase.vote import CastVoteUseCase
from vinyl.domain.error import ForbiddenError, NotFoundError, ValidationError
from vinyl.domain.model.page import AlbumPage
from vinyl.domain.service import tally_votes
from vinyl.domain.value import AlbumFilter, AlbumId, UserId, VoteType
from vinyl.persistence.cache import InMemoryAlbumPageCache
from tests.conftest import make_album, make_vote


class GatedAlbumAuthority(MockAlbumAuthority):
    """Authority whose votes wait until the test opens the gate."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.gate = asyncio.Event()

    async def cast_vote(self, album_id, vote_type, bearer_token, csrf_token):
        self.calls.append(("gate", album_id))
        await self.gate.wait()
        return await super().cast_vote(album_id, vote_type, bearer_token, csrf_token)


def _build(authority: MockAlbumAuthority, *albums):
    state = AlbumState()
    page_cache = InMemoryAlbumPageCache()
    identity = MockIdentityProvider()
    authority.seed(*albums)
    state.show_page(
        AlbumPage(items=list(albums), page_number=1, last_page=1, total_count=len(albums))
    )
    coordinator = MutationCoordinator(
        state=state,
        page_cache=page_cache,
        cast_vote_use_case=CastVoteUseCase(authority=authority, identity=identity),
        delete_album_use_case=DeleteAlbumUseCase(authority=authority, identity=identity),
    )
    return coordinator, state, page_cache


def _fill_cache(page_cache: InMemoryAlbumPageCache, state: AlbumState) -> None:
    page = AlbumPage(items=list(state.albums), page_number=1, last_page=1)
    page_cache.put(AlbumFilter(page=1), page)
    page_cache.put(AlbumFilter(page=1, search="b"), page)


class TestVote:
    """Tests for MutationCoordinator.vote."""

    @pytest.mark.asyncio
    async def test_applies_authoritative_vote_set(self):
        """The visible album should carry the vote set the service returned."""
        # Arrange
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(
            authority, make_album(1, "Blue", votes=[make_vote(1, 5, "down")])
        )

        # Act
        applied = await coordinator.vote(AlbumId(1), VoteType.UP)

        # Assert
        assert applied is True
        tally = tally_votes(state.find(AlbumId(1)).votes)
        assert (tally.up, tally.down) == (1, 1)

    @pytest.mark.asyncio
    async def test_success_clears_whole_page_cache(self):
        """Scores changed, so no cached page may survive."""
        authority = MockAlbumAuthority()
        coordinator, state, page_cache = _build(authority, make_album(1, "Blue"))
        _fill_cache(page_cache, state)

        await coordinator.vote(AlbumId(1), "up")

        assert len(page_cache) == 0

    @pytest.mark.asyncio
    async def test_only_voted_album_changes(self):
        """Other visible albums keep their vote sets."""
        authority = MockAlbumAuthority()
        other_votes = [make_vote(2, 9, "up")]
        coordinator, state, _ = _build(
            authority, make_album(1, "Blue"), make_album(2, "Kid A", votes=other_votes)
        )

        await coordinator.vote(AlbumId(1), VoteType.DOWN)

        assert state.find(AlbumId(2)).votes == other_votes

    @pytest.mark.asyncio
    async def test_duplicate_vote_in_flight_is_dropped(self):
        """A second vote for the same album while one is pending never reaches the service."""
        # Arrange
        authority = GatedAlbumAuthority()
        coordinator, _, _ = _build(authority, make_album(1, "Blue"))

        # Act
        first = asyncio.create_task(coordinator.vote(AlbumId(1), VoteType.UP))
        await asyncio.sleep(0)
        assert coordinator.is_voting(AlbumId(1))

        second = await coordinator.vote(AlbumId(1), VoteType.DOWN)
        authority.gate.set()
        first_result = await first

        # Assert
        assert second is False
        assert first_result is True
        assert authority.call_count("cast_vote") == 1
        assert authority.call_count("gate") == 1
        assert coordinator.votes_in_flight == frozenset()

    @pytest.mark.asyncio
    async def test_votes_on_different_albums_run_concurrently(self):
        """The in-flight gate is per album."""
        authority = GatedAlbumAuthority()
        coordinator, state, _ = _build(
            authority, make_album(1, "Blue"), make_album(2, "Kid A")
        )

        first = asyncio.create_task(coordinator.vote(AlbumId(1), VoteType.UP))
        second = asyncio.create_task(coordinator.vote(AlbumId(2), VoteType.DOWN))
        await asyncio.sleep(0)

        assert coordinator.votes_in_flight == frozenset({AlbumId(1), AlbumId(2)})

        authority.gate.set()
        assert await asyncio.gather(first, second) == [True, True]
        assert tally_votes(state.find(AlbumId(1)).votes).up == 1
        assert tally_votes(state.find(AlbumId(2)).votes).down == 1

    @pytest.mark.asyncio
    async def test_transport_failure_records_error_and_keeps_votes(self):
        """A failed vote leaves votes and cache alone and reports the error."""
        # Arrange
        authority = MockAlbumAuthority()
        votes = [make_vote(1, 5, "up")]
        coordinator, state, page_cache = _build(
            authority, make_album(1, "Blue", votes=votes)
        )
        _fill_cache(page_cache, state)
        authority.fail_next(TransportError("Failed to vote: connection refused"))

        # Act
        with pytest.raises(TransportError):
            await coordinator.vote(AlbumId(1), VoteType.DOWN)

        # Assert
        assert state.error == "Failed to vote: connection refused"
        assert state.find(AlbumId(1)).votes == votes
        assert len(page_cache) == 2
        assert not coordinator.is_voting(AlbumId(1))

    @pytest.mark.asyncio
    async def test_failure_without_message_uses_default(self):
        """An error with no text falls back to the generic message."""
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))
        authority.fail_next(TransportError())

        with pytest.raises(TransportError):
            await coordinator.vote(AlbumId(1), VoteType.UP)

        assert state.error == "Failed to vote"

    @pytest.mark.asyncio
    async def test_invalid_vote_value_is_rejected(self):
        """Only up and down are valid; nothing is sent."""
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))

        with pytest.raises(ValidationError):
            await coordinator.vote(AlbumId(1), "sideways")

        assert authority.call_count("cast_vote") == 0
        assert state.error is not None
        assert not coordinator.is_voting(AlbumId(1))

    @pytest.mark.asyncio
    async def test_malformed_album_id_is_recorded(self):
        """A bad album id fails validation and is reported like a bad vote value."""
        # Arrange
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))

        # Act
        with pytest.raises(ValidationError):
            await coordinator.vote(AlbumId("abc"), VoteType.UP)

        # Assert
        assert state.error == "Invalid album id: 'abc'"
        assert authority.call_count("cast_vote") == 0
        assert not coordinator.is_voting(AlbumId("abc"))

    @pytest.mark.asyncio
    async def test_new_vote_clears_previous_error(self):
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))
        state.error = "Failed to fetch albums"

        await coordinator.vote(AlbumId(1), VoteType.UP)

        assert state.error is None

    @pytest.mark.asyncio
    async def test_two_users_voting_opposite_ways_cancel_out(self):
        """One up and one down from different users nets to zero."""
        # Arrange
        authority = MockAlbumAuthority()
        coordinator, state, page_cache = _build(authority, make_album(1, "Blue"))
        _fill_cache(page_cache, state)

        # Act
        authority.acting_user_id = UserId(1)
        await coordinator.vote(AlbumId(1), VoteType.UP)
        authority.acting_user_id = UserId(2)
        await coordinator.vote(AlbumId(1), VoteType.DOWN)

        # Assert
        tally = tally_votes(state.find(AlbumId(1)).votes)
        assert (tally.up, tally.down) == (1, 1)
        assert tally.net_score == 0
        assert len(page_cache) == 0


class TestDelete:
    """Tests for MutationCoordinator.delete."""

    @pytest.mark.asyncio
    async def test_removes_album_and_clears_cache(self):
        """A successful delete drops the album locally and every cached page."""
        # Arrange
        authority = MockAlbumAuthority()
        coordinator, state, page_cache = _build(
            authority, make_album(1, "Blue"), make_album(2, "Kid A")
        )
        _fill_cache(page_cache, state)

        # Act
        await coordinator.delete(AlbumId(1))

        # Assert
        assert [a.id for a in state.albums] == [AlbumId(2)]
        assert len(page_cache) == 0

    @pytest.mark.asyncio
    async def test_forbidden_delete_keeps_album(self):
        """A refused delete records the error and changes nothing."""
        authority = MockAlbumAuthority(is_admin=False)
        coordinator, state, page_cache = _build(authority, make_album(1, "Blue"))
        _fill_cache(page_cache, state)

        with pytest.raises(ForbiddenError):
            await coordinator.delete(AlbumId(1))

        assert state.error == "Only admins can delete albums"
        assert state.find(AlbumId(1)) is not None
        assert len(page_cache) == 2

    @pytest.mark.asyncio
    async def test_repeated_delete_reaches_service_again(self):
        """Deletes are not gated; the second one finds nothing to delete."""
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))

        await coordinator.delete(AlbumId(1))
        with pytest.raises(NotFoundError):
            await coordinator.delete(AlbumId(1))

        assert authority.call_count("delete_album") == 2
        assert state.albums == []

    @pytest.mark.asyncio
    async def test_malformed_album_id_is_recorded(self):
        """A bad album id never reaches the service and sets the error."""
        authority = MockAlbumAuthority()
        coordinator, state, _ = _build(authority, make_album(1, "Blue"))

        with pytest.raises(ValidationError):
            await coordinator.delete(AlbumId("abc"))

        assert state.error == "Invalid album id: 'abc'"
        assert authority.call_count("delete_album") == 0
        assert state.find(AlbumId(1)) is not None
