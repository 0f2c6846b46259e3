"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional, Sequence

from dojo.domain.error import NotFoundError
from dojo.domain.model import Comment, CommentAuthor, CommentThread, Like
from dojo.domain.model.common import utcnow
from dojo.domain.repository import CommentRepository, EventRepository, UserRepository
from dojo.domain.value import CommentId, EventId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    References to events, users and parents are checked against the given
    repositories the way foreign keys are in the database. Toggles do not
    await between reading and writing the like, so they are atomic on the
    event loop.
    """

    def __init__(
        self, event_repository: EventRepository, user_repository: UserRepository
    ) -> None:
        self.event_repository = event_repository
        self.user_repository = user_repository
        self._comments: dict[CommentId, Comment] = {}
        self._likes: dict[tuple[CommentId, UserId], Like] = {}
        self._ids = count(1)

    async def create(
        self,
        event_id: EventId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
        is_active: bool = True,
    ) -> Comment:
        """Store a new comment."""
        if await self.event_repository.find_by_id(event_id) is None:
            raise NotFoundError("event", event_id, "Referenced event not found")
        if await self.user_repository.find_by_id(author_id) is None:
            raise NotFoundError("user", author_id, "Referenced user not found")
        if parent_id is not None and parent_id not in self._comments:
            raise NotFoundError("comment", parent_id, "Referenced comment not found")

        comment = Comment(
            id=CommentId(next(self._ids)),
            event_id=event_id,
            author_id=author_id,
            body=body,
            parent_id=parent_id,
            is_active=is_active,
            created_at=utcnow(),
        )
        self._comments[comment.id] = comment
        return comment

    def _with_aggregates(self, comment: Comment) -> Comment:
        total_likes = sum(1 for cid, _ in self._likes if cid == comment.id)
        replies_count = sum(
            1
            for c in self._comments.values()
            if c.parent_id == comment.id and c.is_active
        )
        return comment.model_copy(
            update={"total_likes": total_likes, "replies_count": replies_count}
        )

    async def _thread(self, comment: Comment) -> CommentThread:
        author = await self.user_repository.find_by_id(comment.author_id)
        if author is None:
            raise NotFoundError("user", comment.author_id)
        return CommentThread(
            comment=self._with_aggregates(comment),
            author=CommentAuthor(id=author.id, name=author.name),
        )

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Load a comment with fresh like and reply counts."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id, "Comment not found")
        return self._with_aggregates(comment)

    async def list_for_event(self, event_id: EventId) -> list[CommentThread]:
        """List active root comments of an event with their replies."""
        roots = [
            c
            for c in self._comments.values()
            if c.event_id == event_id and c.parent_id is None and c.is_active
        ]
        roots.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        threads = []
        for root in roots:
            children = [
                c
                for c in self._comments.values()
                if c.parent_id == root.id and c.is_active
            ]
            children.sort(key=lambda c: (c.created_at, c.id))

            thread = await self._thread(root)
            replies = [await self._thread(child) for child in children]
            threads.append(thread.model_copy(update={"replies": replies}))
        return threads

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove the pair's like if present, otherwise add it."""
        if comment_id not in self._comments:
            raise NotFoundError("comment", comment_id, "Comment not found")
        if await self.user_repository.find_by_id(user_id) is None:
            raise NotFoundError("user", user_id, "Referenced user not found")

        # No await from here on, so the read and the write are atomic
        key = (comment_id, user_id)
        if self._likes.pop(key, None) is not None:
            return False
        self._likes[key] = Like(comment_id=comment_id, user_id=user_id)
        return True

    async def like_exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether the user currently likes the comment."""
        return (comment_id, user_id) in self._likes

    async def liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return the subset of comment_ids the user likes."""
        return {cid for cid in comment_ids if (cid, user_id) in self._likes}

    async def deactivate(self, comment_id: CommentId) -> None:
        """Hide a comment (test helper standing in for moderation)."""
        comment = self._comments[comment_id]
        self._comments[comment_id] = comment.model_copy(update={"is_active": False})
