"""PostgreSQL implementation of Event repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from dojo.domain.model import Event
from dojo.domain.repository import EventRepository
from dojo.domain.value import EventId
from dojo.persistence.mappers import event_to_dict, row_to_event
from dojo.persistence.tables import events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_event(row._asdict()) if row else None

    async def save(self, event: Event) -> Event:
        """Save an event (upsert on ID)."""
        values = event_to_dict(event)
        stmt = (
            pg_insert(events_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[events_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return event
