"""Test configuration and fixtures."""

from datetime import date

import logfire
import pytest

from dojo.domain.model import Event, User
from dojo.domain.repository import EventRepository, UserRepository
from dojo.domain.value import DisplayName, EventId, UserId, UserRole


@pytest.fixture(scope="session", autouse=True)
def local_logfire():
    """Keep spans and events local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


async def seed_event(
    event_repo: EventRepository, event_id: int, name: str = "Spring Grading"
) -> Event:
    """Store an event so comments can reference it."""
    return await event_repo.save(
        Event(id=EventId(event_id), name=name, event_date=date(2026, 4, 12))
    )


async def seed_user(
    user_repo: UserRepository,
    user_id: int,
    name: str = "Kenji Sato",
    role: UserRole = UserRole.STUDENT,
) -> User:
    """Store an academy member so they can author comments."""
    return await user_repo.save(
        User(id=UserId(user_id), name=DisplayName(root=name), role=role)
    )
