"""Vote entity.

Votes are issued by the album service and embedded in the album they
target. The client never creates or edits a vote; it only holds the copy
the service last returned.
"""

from datetime import datetime

from pydantic import Field

from vinyl.domain.model.common import DomainModel
from vinyl.domain.value import AlbumId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules (enforced by the album service, not the client):
    - One vote per user per album
    - A vote is either up or down
    """

    id: VoteId
    album_id: AlbumId
    user_id: UserId
    value: VoteType = Field(alias="vote")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
