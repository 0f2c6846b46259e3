"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from dojo.domain.model import Comment, CommentAuthor, CommentView
from dojo.util.timefmt import diff_for_humans


class CommentUserItem(BaseModel):
    """Author summary in a comment item."""

    id: int
    name: str

    @classmethod
    def from_author(cls, author: CommentAuthor) -> "CommentUserItem":
        return cls(id=author.id, name=author.name.root)


class CommentItem(BaseModel):
    """Comment as returned by the API.

    ``replies`` is always empty for a reply.
    """

    id: int
    parent_id: int | None
    comment: str
    created_at: datetime
    created_human: str
    total_likes: int
    is_liked: bool
    user: CommentUserItem
    replies_count: int
    replies: list["CommentItem"]

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        """Build an item tree from a comment view."""
        return cls(
            id=view.id,
            parent_id=view.parent_id,
            comment=view.body,
            created_at=view.created_at,
            created_human=diff_for_humans(view.created_at),
            total_likes=view.total_likes,
            is_liked=view.is_liked,
            user=CommentUserItem.from_author(view.author),
            replies_count=view.replies_count,
            replies=[cls.from_view(reply) for reply in view.replies],
        )

    @classmethod
    def from_new_comment(
        cls, comment: Comment, author: CommentUserItem
    ) -> "CommentItem":
        """Build the item for a comment that was just created."""
        return cls(
            id=comment.id,
            parent_id=comment.parent_id,
            comment=comment.body,
            created_at=comment.created_at,
            created_human=diff_for_humans(comment.created_at),
            total_likes=0,
            is_liked=False,
            user=author,
            replies_count=0,
            replies=[],
        )
