"""Academy event entity (tournaments, seminars, gradings)."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from dojo.domain.model.common import DomainModel, utcnow
from dojo.domain.value import EventId


class Event(DomainModel):
    """Event that students can enroll in and comment on."""

    id: EventId
    name: str = Field(min_length=1, max_length=255)
    event_date: Optional[date] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
