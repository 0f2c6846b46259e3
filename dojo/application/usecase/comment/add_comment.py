"""Add comment use case."""

from pydantic import BaseModel

from dojo.application.usecase.base import BaseUseCase
from dojo.domain.error import NotFoundError
from dojo.domain.service import CommentService, UserService
from dojo.domain.value import CommentId, EventId, UserId

from .items import CommentItem, CommentUserItem


class AddCommentRequest(BaseModel):
    """Add comment request."""

    event_id: int
    comment: str
    user_id: int  # From the authenticated user
    parent_id: int | None = None  # Comment being replied to


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on an event or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        The service validates the event and parent and flattens replies to
        replies, so the returned ``parent_id`` may differ from the requested
        one. The author summary uses the stored member name, as listings do.

        Args:
            request: Add comment request

        Returns:
            The created comment with zero-valued aggregates

        Raises:
            ValidationError: If the comment is blank
            NotFoundError: If event, parent comment or author not found
            InvalidReferenceError: If parent belongs to another event
        """
        comment = await self.comment_service.add_comment(
            event_id=EventId(request.event_id),
            user_id=UserId(request.user_id),
            body=request.comment,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        author = await self.user_service.get_user_by_id(comment.author_id)
        if author is None:
            raise NotFoundError("user", comment.author_id, "Referenced user not found")

        return CommentItem.from_new_comment(
            comment,
            CommentUserItem(id=author.id, name=author.name.root),
        )
