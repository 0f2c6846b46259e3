"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from dojo.domain.model.comment import Comment, CommentThread
from dojo.domain.value import CommentId, EventId, UserId


class CommentRepository(ABC):
    """Repository for event comments and their likes.

    Owns persisted Comment and Like records. Enforces referential existence
    only; nesting rules live in CommentService.
    """

    @abstractmethod
    async def create(
        self,
        event_id: EventId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
        is_active: bool = True,
    ) -> Comment:
        """Persist a new comment.

        Args:
            event_id: Event the comment belongs to
            author_id: Author user ID
            body: Comment text
            parent_id: Root comment being replied to (None for a root)
            is_active: Visibility flag

        Returns:
            The stored comment with its generated ID

        Raises:
            NotFoundError: If a referenced event, author or parent is missing
            ConflictError: On any other constraint violation
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Load a comment with fresh like and reply counts.

        Raises:
            NotFoundError: If no comment has this ID
        """
        pass

    @abstractmethod
    async def list_for_event(self, event_id: EventId) -> list[CommentThread]:
        """List active root comments of an event, newest first.

        Each root is populated with its active replies (oldest first), the
        author of every comment and reply, and like counts. Every call runs
        fresh queries.
        """
        pass

    @abstractmethod
    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Like the comment if the user has not, otherwise remove the like.

        Atomic for concurrent toggles from the same (comment, user) pair.

        Returns:
            True if the comment is now liked, False if now unliked

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def like_exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether the user currently likes the comment."""
        pass

    @abstractmethod
    async def liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return the subset of comment_ids the user likes (batch query)."""
        pass
