"""Comment domain service."""

import logfire

from dojo.domain.error import InvalidReferenceError, NotFoundError, ValidationError
from dojo.domain.model.comment import (
    Comment,
    CommentThread,
    CommentView,
    LikeToggleResult,
)
from dojo.domain.repository import CommentRepository
from dojo.domain.value import CommentId, EventId, UserId

from .base import Service
from .event_service import EventService


class CommentService(Service):
    """Domain service for event comments, replies and likes.

    Keeps the one-level nesting invariant: every reply points at a root
    comment of the same event.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        event_service: EventService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            event_service: Event domain service
        """
        self.comment_repository = comment_repository
        self.event_service = event_service

    async def add_comment(
        self,
        event_id: EventId,
        user_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Add a comment to an event or reply to an existing comment.

        A reply to a reply is attached to the replied comment's root, so the
        stored parent is always a root comment.

        Args:
            event_id: Event ID
            user_id: Author user ID
            body: Comment text
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            Created comment

        Raises:
            ValidationError: If body is blank
            NotFoundError: If event or parent comment does not exist
            InvalidReferenceError: If parent belongs to another event
        """
        with logfire.span(
            "comment_service.add_comment",
            event_id=event_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            body = body.strip()
            if not body:
                raise ValidationError("Comment must not be empty")

            event = await self.event_service.get_event_by_id(event_id)
            if event is None:
                raise NotFoundError("event", event_id, "Event not found")

            if parent_id is not None:
                parent_id = await self._resolve_parent(event_id, parent_id)

            comment = await self.comment_repository.create(
                event_id=event_id,
                author_id=user_id,
                body=body,
                parent_id=parent_id,
                is_active=True,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                event_id=event_id,
                parent_id=comment.parent_id,
            )
            return comment

    async def _resolve_parent(
        self, event_id: EventId, parent_id: CommentId
    ) -> CommentId:
        """Return the root comment a reply should be stored under."""
        try:
            parent = await self.comment_repository.find_by_id(parent_id)
        except NotFoundError:
            logfire.warn("Parent comment not found", parent_id=parent_id)
            raise NotFoundError("comment", parent_id, "Parent comment not found")

        if parent.event_id != event_id:
            logfire.warn(
                "Parent comment belongs to another event",
                parent_id=parent_id,
                parent_event_id=parent.event_id,
                target_event_id=event_id,
            )
            raise InvalidReferenceError("Parent comment does not belong to this event")

        # Replies never nest: a reply's parent is already a root
        if parent.parent_id is not None:
            logfire.info(
                "Flattening reply to root comment",
                replied_to=parent_id,
                root_id=parent.parent_id,
            )
            return parent.parent_id
        return parent_id

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> LikeToggleResult:
        """Like or unlike a comment for a user.

        The returned total is read after the toggle and may already include
        concurrent toggles from other users.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.toggle_like", comment_id=comment_id, user_id=user_id
        ):
            liked = await self.comment_repository.toggle_like(comment_id, user_id)
            comment = await self.comment_repository.find_by_id(comment_id)
            logfire.info(
                "Comment like toggled",
                comment_id=comment_id,
                liked=liked,
                total_likes=comment.total_likes,
            )
            return LikeToggleResult(liked=liked, total_likes=comment.total_likes)

    async def list_comments(
        self, event_id: EventId, viewer_id: UserId | None = None
    ) -> list[CommentView]:
        """List an event's comment tree as seen by a viewer.

        Args:
            event_id: Event ID
            viewer_id: Viewing user; without one, nothing is marked as liked

        Returns:
            Root comments newest first, each with its replies
        """
        with logfire.span(
            "comment_service.list_comments", event_id=event_id, viewer_id=viewer_id
        ):
            threads = await self.comment_repository.list_for_event(event_id)

            liked: set[CommentId] = set()
            if viewer_id is not None and threads:
                comment_ids = [
                    c.comment.id for t in threads for c in (t, *t.replies)
                ]
                liked = await self.comment_repository.liked_comment_ids(
                    viewer_id, comment_ids
                )

            views = [self._to_view(thread, liked) for thread in threads]
            logfire.info("Comments listed", event_id=event_id, count=len(views))
            return views

    @staticmethod
    def _to_view(
        thread: CommentThread, liked: set[CommentId], is_reply: bool = False
    ) -> CommentView:
        comment = thread.comment
        replies = (
            []
            if is_reply
            else [CommentService._to_view(r, liked, is_reply=True) for r in thread.replies]
        )
        return CommentView(
            id=comment.id,
            event_id=comment.event_id,
            parent_id=comment.parent_id,
            body=comment.body,
            created_at=comment.created_at,
            total_likes=comment.total_likes,
            is_liked=comment.id in liked,
            author=thread.author,
            replies_count=len(replies),
            replies=replies,
        )
