"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .event_service import EventService
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "CommentService",
    "EventService",
    "JWTService",
    "Service",
    "UserService",
]
