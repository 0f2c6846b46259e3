"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dojo.domain.model.user import User
from dojo.domain.value import UserId


class UserRepository(ABC):
    """Repository for academy accounts."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
