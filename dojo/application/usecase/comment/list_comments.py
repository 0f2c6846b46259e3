"""List comments use case."""

from pydantic import BaseModel

from dojo.application.usecase.base import BaseUseCase
from dojo.domain.service import CommentService
from dojo.domain.value import EventId, UserId

from .items import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    event_id: int
    viewer_id: int | None = None  # Authenticated viewer, if any


class ListCommentsResponse(BaseModel):
    """List comments response."""

    event_id: int
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading an event's comment threads."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Root comments come newest first, each with its replies oldest first.
        ``is_liked`` reflects the viewer and is false for anonymous callers.
        """
        views = await self.comment_service.list_comments(
            event_id=EventId(request.event_id),
            viewer_id=UserId(request.viewer_id)
            if request.viewer_id is not None
            else None,
        )
        items = [CommentItem.from_view(view) for view in views]

        return ListCommentsResponse(
            event_id=request.event_id,
            comments=items,
            total=len(items),
        )
