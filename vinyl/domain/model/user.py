"""Signed-in user as seen by the client."""

from typing import Optional

from vinyl.domain.model.common import DomainModel
from vinyl.domain.value import UserId

ADMIN_ROLE = "admin"


class User(DomainModel):
    """User returned by the album service on sign-in.

    Only admins may delete albums; the service enforces it, the client
    uses ``is_admin`` to decide what to offer.
    """

    id: UserId
    name: str
    email: str
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
