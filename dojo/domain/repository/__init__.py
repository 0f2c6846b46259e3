"""Repository interfaces for the academy domain.

Interfaces live in the domain layer; implementations live in
``dojo.persistence``.
"""

from dojo.domain.repository.comment import CommentRepository
from dojo.domain.repository.event import EventRepository
from dojo.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "EventRepository",
    "UserRepository",
]
