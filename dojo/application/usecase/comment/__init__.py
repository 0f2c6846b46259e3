"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .items import CommentItem, CommentUserItem
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentItem",
    "CommentUserItem",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
