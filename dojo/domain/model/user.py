"""Academy account (student, instructor or admin)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dojo.domain.model.common import DomainModel, utcnow
from dojo.domain.value import DisplayName, UserId, UserRole


class User(DomainModel):
    """Academy account."""

    id: UserId
    name: DisplayName
    email: Optional[str] = None
    role: UserRole = UserRole.STUDENT
    created_at: datetime = Field(default_factory=utcnow)
