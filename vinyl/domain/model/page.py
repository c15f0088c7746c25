"""Album page snapshot.

One page of a list query exactly as the album service returned it.
Pages are never edited: a later fetch for the same filter supersedes the
stored page and a mutation discards it.
"""

from typing import Optional

from pydantic import Field

from vinyl.domain.model.album import Album
from vinyl.domain.model.common import DomainModel


class AlbumPage(DomainModel):
    """Paginated album list.

    Field aliases follow the service's paginator payload
    (``data``, ``current_page``, ``total``, ``from``, ``to``).
    """

    items: list[Album] = Field(default_factory=list, alias="data")
    page_number: int = Field(default=1, ge=1, alias="current_page")
    last_page: int = Field(default=1, ge=0)
    total_count: int = Field(default=0, ge=0, alias="total")
    per_page: Optional[int] = None
    from_item: Optional[int] = Field(default=None, alias="from")
    to_item: Optional[int] = Field(default=None, alias="to")
    next_page_url: Optional[str] = None
    prev_page_url: Optional[str] = None

    @property
    def has_next_page(self) -> bool:
        """Whether a page after this one exists."""
        return self.page_number < self.last_page
