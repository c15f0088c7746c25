"""Album aggregate root.

Albums are created and destroyed by the album service. The client copy is
created on fetch, replaced when a vote response arrives and dropped from the
visible list when a delete succeeds.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vinyl.domain.model.common import DomainModel
from vinyl.domain.model.vote import Vote
from vinyl.domain.value import AlbumId


class Album(DomainModel):
    """Album aggregate root.

    The service names the title field ``song_name`` and the cover
    ``album_cover``; both are accepted on input.
    """

    id: AlbumId
    title: str = Field(alias="song_name")
    artist_name: str
    cover_image: Optional[str] = Field(default=None, alias="album_cover")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    votes: list[Vote] = Field(default_factory=list)

    def with_votes(self, votes: list[Vote]) -> "Album":
        """Return a copy carrying the given vote set.

        The vote set is replaced wholesale, never merged.
        """
        return self.model_copy(update={"votes": list(votes)})
