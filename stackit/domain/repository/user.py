"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from stackit.domain.model.user import User
from stackit.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[User]:
        """Find several users in one query.

        Unknown IDs are skipped silently.

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def adjust_reputation(self, user_id: UserId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to the user's reputation, floored at 0.

        Args:
            user_id: The user's unique identifier
            delta: Amount to add (negative for penalties)

        Returns:
            The new reputation, or None if the user does not exist
        """
        pass
