"""PostgreSQL repository implementations."""

from dojo.persistence.repository.comment import PostgresCommentRepository
from dojo.persistence.repository.event import PostgresEventRepository
from dojo.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresEventRepository",
    "PostgresUserRepository",
]
