"""Strongly typed identifiers for Vinyl domain entities.

The album service issues integer primary keys. NewType keeps album, vote
and user ids from being mixed up at call sites.
"""

from typing import NewType

AlbumId = NewType("AlbumId", int)
VoteId = NewType("VoteId", int)
UserId = NewType("UserId", int)
