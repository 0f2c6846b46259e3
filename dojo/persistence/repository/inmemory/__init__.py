"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .event import InMemoryEventRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryEventRepository",
    "InMemoryUserRepository",
]
