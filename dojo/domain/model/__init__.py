"""Domain model entities for the academy."""

from dojo.domain.model.comment import (
    Comment,
    CommentAuthor,
    CommentThread,
    CommentView,
    LikeToggleResult,
)
from dojo.domain.model.event import Event
from dojo.domain.model.like import Like
from dojo.domain.model.user import User

__all__ = [
    "Comment",
    "CommentAuthor",
    "CommentThread",
    "CommentView",
    "Event",
    "Like",
    "LikeToggleResult",
    "User",
]
