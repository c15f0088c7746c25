"""Domain value objects for Vinyl."""

from vinyl.domain.value.identifiers import AlbumId, UserId, VoteId
from vinyl.domain.value.types import (
    AlbumFilter,
    SessionStatus,
    VoteTally,
    VoteType,
)

__all__ = [
    # Identifiers
    "AlbumId",
    "UserId",
    "VoteId",
    # Types
    "AlbumFilter",
    "SessionStatus",
    "VoteTally",
    "VoteType",
]
