"""In-memory user repository for testing."""

from typing import Iterable, Optional

from banter.domain.model.user import User
from banter.domain.repository.user import UserRepository
from banter.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch lookup of users by ID."""
        return {uid: self._users[uid] for uid in set(user_ids) if uid in self._users}

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
