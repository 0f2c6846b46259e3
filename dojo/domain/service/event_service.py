"""Event domain service."""

import logfire

from dojo.domain.model.event import Event
from dojo.domain.repository import EventRepository
from dojo.domain.value import EventId

from .base import Service


class EventService(Service):
    """Domain service for event lookups."""

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def get_event_by_id(self, event_id: EventId) -> Event | None:
        """Get an event by ID.

        Args:
            event_id: Event ID

        Returns:
            Event if found, None otherwise
        """
        with logfire.span("event_service.get_event_by_id", event_id=event_id):
            event = await self.event_repository.find_by_id(event_id)
            if event is None:
                logfire.warn("Event not found", event_id=event_id)
            return event
