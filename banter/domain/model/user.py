"""User entity.

Users sign in through an external identity provider; the comment
subsystem only needs their display fields and role.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from banter.domain.model.common import DomainModel
from banter.domain.value import UserId, UserRole


class User(DomainModel):
    """Platform user."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
