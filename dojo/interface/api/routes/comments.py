"""Event comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field, field_validator

from dojo.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentItem,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from dojo.config import CommentSettings
from dojo.domain.error import ValidationError
from dojo.domain.service import JWTService
from dojo.interface.api.security import optional_viewer, require_commenter

router = APIRouter(prefix="/events", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    event_id: int
    comment: str = Field(min_length=1)
    parent_id: int | None = None  # Comment being replied to

    @field_validator("comment")
    @classmethod
    def comment_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Comment must not be empty")
        return value


class ToggleLikeAPIRequest(BaseModel):
    """API request for toggling a like."""

    comment_id: int


@router.post(
    "/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    comment_settings: FromDishka[CommentSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on an event or reply to a comment.

    Requires an authenticated academy member. A reply to a reply is attached
    to the top-level comment of that thread.

    Raises:
        HTTPException: 401 if not authenticated, 403 if role not allowed
    """
    payload = require_commenter(
        jwt_service, comment_settings, authorization, auth_token
    )
    if len(request.comment.strip()) > comment_settings.max_length:
        raise ValidationError(
            f"Comment must be at most {comment_settings.max_length} characters"
        )

    return await add_comment_use_case.execute(
        AddCommentRequest(
            event_id=request.event_id,
            comment=request.comment,
            user_id=payload.user_id,
            parent_id=request.parent_id,
        )
    )


@router.post("/comments/like", response_model=ToggleLikeResponse)
async def toggle_like(
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    comment_settings: FromDishka[CommentSettings],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a comment, or unlike it if already liked."""
    payload = require_commenter(
        jwt_service, comment_settings, authorization, auth_token
    )

    return await toggle_like_use_case.execute(
        ToggleLikeRequest(comment_id=request.comment_id, user_id=payload.user_id)
    )


@router.get("/{event_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    event_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """List an event's comments with their replies.

    Public endpoint. With a valid token, ``is_liked`` reflects the caller.
    """
    viewer = optional_viewer(jwt_service, authorization, auth_token)

    return await list_comments_use_case.execute(
        ListCommentsRequest(
            event_id=event_id,
            viewer_id=viewer.user_id if viewer else None,
        )
    )
