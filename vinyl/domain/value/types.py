"""Domain value objects for Vinyl.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, computed_field

from vinyl.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Direction of a vote on an album."""

    UP = "up"
    DOWN = "down"


class SessionStatus(str, Enum):
    """Lifecycle of the album list held by a session."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERRORED = "errored"


class AlbumFilter(ValueObject):
    """Parameters of one album list query.

    Two filters are the same query iff page and search text are equal.
    Search text is compared exactly: no trimming, no case folding.
    An empty search means no filtering.
    """

    page: int = Field(default=1, ge=1)
    search: str = ""

    @property
    def cache_key(self) -> str:
        """Canonical key used to index the page cache.

        The page part only ever holds digits, so the first hyphen always
        separates page from search text and distinct filters never share
        a key.
        """
        return f"{self.page}-{self.search}"


class VoteTally(ValueObject):
    """Aggregate vote counts for one album."""

    up: int = Field(default=0, ge=0)
    down: int = Field(default=0, ge=0)

    @computed_field
    @property
    def net_score(self) -> int:
        """Up votes minus down votes. Drives ranking."""
        return self.up - self.down
