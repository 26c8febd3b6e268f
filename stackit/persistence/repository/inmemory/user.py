"""In-memory user repository for testing."""

from typing import Iterable, List, Optional

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find all users whose ID is in ``user_ids``."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> Optional[int]:
        """Add ``delta`` to the user's reputation, floored at 0."""
        user = self._users.get(user_id)
        if not user:
            return None
        reputation = max(0, user.reputation + delta)
        self._users[user_id] = user.model_copy(update={"reputation": reputation})
        return reputation
