"""Mappers for converting database rows into domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Mapping

from dojo.domain.model import Comment, CommentAuthor, Event, User
from dojo.domain.value import CommentId, DisplayName, EventId, UserId, UserRole


def row_to_comment(row: Mapping[str, Any]) -> Comment:
    """Convert a database row to a Comment.

    Aggregate columns (``total_likes``, ``replies_count``) are optional
    and default to zero when the query did not select them.

    Args:
        row: Database row as mapping

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        event_id=EventId(row["event_id"]),
        author_id=UserId(row["user_id"]),
        body=row["comment"],
        parent_id=CommentId(row["parent_id"]) if row["parent_id"] is not None else None,
        is_active=row["is_active"],
        created_at=row["created_at"],
        total_likes=row.get("total_likes") or 0,
        replies_count=row.get("replies_count") or 0,
    )


def row_to_author(row: Mapping[str, Any]) -> CommentAuthor:
    """Convert the author columns of a comment row to a CommentAuthor."""
    return CommentAuthor(
        id=UserId(row["user_id"]),
        name=DisplayName(row["author_name"]),
    )


def row_to_event(row: Mapping[str, Any]) -> Event:
    """Convert a database row to an Event."""
    return Event(
        id=EventId(row["id"]),
        name=row["name"],
        event_date=row.get("event_date"),
        is_active=row["is_active"],
        created_at=row["created_at"],
    )


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert a database row to a User."""
    return User(
        id=UserId(row["id"]),
        name=DisplayName(row["name"]),
        email=row.get("email"),
        role=UserRole.parse(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert a User to a dict suitable for insertion/update."""
    return {
        "id": user.id,
        "name": user.name.root,
        "email": user.email,
        "role": user.role.value,
        "created_at": user.created_at,
    }


def event_to_dict(event: Event) -> dict[str, Any]:
    """Convert an Event to a dict suitable for insertion/update."""
    return event.model_dump()
