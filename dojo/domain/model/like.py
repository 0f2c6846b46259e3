"""Comment like entity."""

from datetime import datetime

from pydantic import Field

from dojo.domain.model.common import DomainModel, utcnow
from dojo.domain.value import CommentId, UserId


class Like(DomainModel):
    """A user's like on a comment.

    Identity is the (comment_id, user_id) pair; at most one like per pair
    exists (enforced by a database unique constraint). Likes are only ever
    created or deleted by a toggle.
    """

    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
