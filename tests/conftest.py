"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from vinyl.domain.model.album import Album
from vinyl.domain.model.vote import Vote
from vinyl.domain.value import AlbumId, UserId, VoteId, VoteType

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

_vote_ids = iter(range(1000, 10**6))


def make_vote(album_id: int, user_id: int, value: VoteType | str) -> Vote:
    """Helper function to build a vote as the album service would return it.

    Args:
        album_id: Album the vote belongs to
        user_id: Voting user
        value: "up" or "down"

    Returns:
        Vote with a fresh id
    """
    now = datetime.now()
    return Vote(
        id=VoteId(next(_vote_ids)),
        album_id=AlbumId(album_id),
        user_id=UserId(user_id),
        value=VoteType(value),
        created_at=now,
        updated_at=now,
    )


def make_album(
    album_id: int,
    title: str,
    artist_name: str = "Test Artist",
    votes: list[Vote] | None = None,
) -> Album:
    """Helper function to build an album.

    Args:
        album_id: Album id
        title: Album title
        artist_name: Artist name
        votes: Vote set, empty by default

    Returns:
        Album
    """
    now = datetime.now()
    return Album(
        id=AlbumId(album_id),
        title=title,
        artist_name=artist_name,
        created_at=now,
        updated_at=now,
        votes=votes or [],
    )
