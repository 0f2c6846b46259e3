"""Event comment entities.

Comments are discussions attached to academy events. Nesting is capped at
one level: a root comment has no parent and a reply's parent is always a
root. Replying to a reply attaches the new comment to that reply's root.

Like counts, viewer flags and reply counts are derived at read time and
never stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from dojo.domain.model.common import DomainModel, utcnow
from dojo.domain.value import CommentId, DisplayName, EventId, UserId


class Comment(DomainModel):
    """Comment entity.

    ``total_likes`` and ``replies_count`` are aggregates filled in by the
    repository when the comment is read.
    """

    id: CommentId
    event_id: EventId
    author_id: UserId
    body: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    total_likes: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)

    @property
    def is_root(self) -> bool:
        """Whether this comment sits at depth 0."""
        return self.parent_id is None


class CommentAuthor(DomainModel):
    """Author summary shown next to a comment."""

    id: UserId
    name: DisplayName


class CommentThread(DomainModel):
    """A comment materialized with its author and replies.

    Returned by the repository listing; replies never carry replies.
    """

    comment: Comment
    author: CommentAuthor
    replies: list["CommentThread"] = Field(default_factory=list)


class CommentView(DomainModel):
    """Read model of a comment as seen by one viewer."""

    id: CommentId
    event_id: EventId
    parent_id: Optional[CommentId]
    body: str
    created_at: datetime
    total_likes: int
    is_liked: bool
    author: CommentAuthor
    replies_count: int
    replies: list["CommentView"] = Field(default_factory=list)


class LikeToggleResult(DomainModel):
    """Outcome of a like toggle.

    ``total_likes`` is read after the toggle and may include concurrent
    toggles by other users.
    """

    liked: bool
    total_likes: int
