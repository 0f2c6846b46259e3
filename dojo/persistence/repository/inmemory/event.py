"""In-memory event repository for testing."""

from typing import Optional

from dojo.domain.model import Event
from dojo.domain.repository import EventRepository
from dojo.domain.value import EventId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._events.get(event_id)

    async def save(self, event: Event) -> Event:
        """Save or update an event."""
        self._events[event.id] = event
        return event
