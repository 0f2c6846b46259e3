"""Domain value objects for the academy."""

from dojo.domain.value.identifiers import CommentId, EventId, UserId
from dojo.domain.value.types import DisplayName, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "EventId",
    "CommentId",
    # Types
    "DisplayName",
    "UserRole",
]
