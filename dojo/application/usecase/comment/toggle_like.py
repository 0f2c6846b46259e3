"""Toggle like use case."""

from pydantic import BaseModel

from dojo.application.usecase.base import BaseUseCase
from dojo.domain.service import CommentService
from dojo.domain.value import CommentId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: int
    user_id: int  # From the authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    total_likes: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        result = await self.comment_service.toggle_like(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return ToggleLikeResponse(liked=result.liked, total_likes=result.total_likes)
