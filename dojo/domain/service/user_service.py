"""User domain service."""

import logfire

from dojo.domain.model.user import User
from dojo.domain.repository import UserRepository
from dojo.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for academy member lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID, or None if there is no such member."""
        with logfire.span("user_service.get_user_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=user_id)
            return user
