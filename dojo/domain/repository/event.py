"""Event repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from dojo.domain.model.event import Event
from dojo.domain.value import EventId


class EventRepository(ABC):
    """Repository for academy events (read mostly)."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID.

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        pass
