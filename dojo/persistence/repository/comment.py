"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from typing import Mapping, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dojo.domain.error import ConflictError, DomainError, NotFoundError
from dojo.domain.model import Comment, CommentThread
from dojo.domain.repository import CommentRepository
from dojo.domain.value import CommentId, EventId, UserId
from dojo.persistence.mappers import row_to_author, row_to_comment
from dojo.persistence.tables import (
    event_comment_likes_table,
    event_comments_table,
    users_table,
)

FOREIGN_KEY_VIOLATION = "23503"

# Foreign key constraint name -> resource the key references
FOREIGN_KEY_RESOURCES = {
    "fk_event_comments_event_id": "event",
    "fk_event_comments_user_id": "user",
    "fk_event_comments_parent_id": "comment",
    "fk_event_comment_likes_comment_id": "comment",
    "fk_event_comment_likes_user_id": "user",
}

comments = event_comments_table
likes = event_comment_likes_table
replies = event_comments_table.alias("replies")


def _constraint_name(error: IntegrityError) -> str | None:
    """Name of the violated constraint.

    Checked on the DBAPI error and on the asyncpg exception it wraps.
    """
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def _integrity_error_to_domain(
    error: IntegrityError, references: Mapping[str, object]
) -> DomainError:
    """Classify a constraint violation raised by a write.

    Args:
        error: The integrity error
        references: Identifiers written by the statement, keyed by resource
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == FOREIGN_KEY_VIOLATION:
        resource = FOREIGN_KEY_RESOURCES.get(_constraint_name(error) or "", "reference")
        return NotFoundError(
            resource,
            references.get(resource),
            f"Referenced {resource} not found",
        )
    return ConflictError("Constraint violation on comment")


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Aggregates are computed by correlated subqueries so every read reflects
    the committed like and reply rows at query time.
    """

    # A toggle that keeps losing the insert race gives up after this many rounds
    max_toggle_attempts = 3

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_comments(self):
        """Comment columns with author name and aggregate counts."""
        total_likes = (
            select(func.count())
            .select_from(likes)
            .where(likes.c.event_comment_id == comments.c.id)
            .scalar_subquery()
            .label("total_likes")
        )
        replies_count = (
            select(func.count())
            .select_from(replies)
            .where(replies.c.parent_id == comments.c.id)
            .where(replies.c.is_active.is_(True))
            .scalar_subquery()
            .label("replies_count")
        )
        return select(
            comments,
            users_table.c.name.label("author_name"),
            total_likes,
            replies_count,
        ).select_from(comments.join(users_table, users_table.c.id == comments.c.user_id))

    async def create(
        self,
        event_id: EventId,
        author_id: UserId,
        body: str,
        parent_id: Optional[CommentId] = None,
        is_active: bool = True,
    ) -> Comment:
        """Persist a new comment."""
        stmt = (
            insert(comments)
            .values(
                event_id=event_id,
                user_id=author_id,
                comment=body,
                parent_id=parent_id,
                is_active=is_active,
            )
            .returning(comments)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn("Comment insert rejected", event_id=event_id, error=str(e))
            raise _integrity_error_to_domain(
                e, {"event": event_id, "user": author_id, "comment": parent_id}
            ) from e

        await self.session.flush()
        return row_to_comment(result.one()._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Load a comment with fresh like and reply counts."""
        stmt = self._select_comments().where(comments.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("comment", comment_id, "Comment not found")
        return row_to_comment(row._asdict())

    async def list_for_event(self, event_id: EventId) -> list[CommentThread]:
        """List active root comments of an event with their replies."""
        roots_stmt = (
            self._select_comments()
            .where(comments.c.event_id == event_id)
            .where(comments.c.parent_id.is_(None))
            .where(comments.c.is_active.is_(True))
            .order_by(comments.c.created_at.desc(), comments.c.id.desc())
        )
        root_rows = [row._asdict() for row in (await self.session.execute(roots_stmt))]
        if not root_rows:
            return []

        root_ids = [row["id"] for row in root_rows]
        replies_stmt = (
            self._select_comments()
            .where(comments.c.parent_id.in_(root_ids))
            .where(comments.c.is_active.is_(True))
            .order_by(comments.c.created_at, comments.c.id)
        )
        replies_by_parent: dict[int, list[CommentThread]] = defaultdict(list)
        for row in await self.session.execute(replies_stmt):
            data = row._asdict()
            replies_by_parent[data["parent_id"]].append(
                CommentThread(comment=row_to_comment(data), author=row_to_author(data))
            )

        return [
            CommentThread(
                comment=row_to_comment(data),
                author=row_to_author(data),
                replies=replies_by_parent.get(data["id"], []),
            )
            for data in root_rows
        ]

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Toggle a like with conditional writes.

        Deleting first and inserting with ON CONFLICT DO NOTHING means two
        concurrent toggles from one pair can never both insert; a toggle that
        loses the insert race deletes the winner's row on the next round.
        """
        await self.find_by_id(comment_id)

        pair = and_(
            likes.c.event_comment_id == comment_id,
            likes.c.user_id == user_id,
        )
        for _ in range(self.max_toggle_attempts):
            deleted = await self.session.execute(
                delete(likes).where(pair).returning(likes.c.id)
            )
            if deleted.first() is not None:
                return False

            stmt = (
                pg_insert(likes)
                .values(event_comment_id=comment_id, user_id=user_id)
                .on_conflict_do_nothing(constraint="uq_event_comment_like")
                .returning(likes.c.id)
            )
            try:
                inserted = await self.session.execute(stmt)
            except IntegrityError as e:
                raise _integrity_error_to_domain(
                    e, {"comment": comment_id, "user": user_id}
                ) from e
            if inserted.first() is not None:
                return True

            logfire.info(
                "Like toggle lost insert race, retrying",
                comment_id=comment_id,
                user_id=user_id,
            )

        raise ConflictError("Like is being changed concurrently, try again")

    async def like_exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether the user currently likes the comment."""
        stmt = (
            select(likes.c.id)
            .where(likes.c.event_comment_id == comment_id)
            .where(likes.c.user_id == user_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return the subset of comment_ids the user likes."""
        if not comment_ids:
            return set()

        stmt = select(likes.c.event_comment_id).where(
            and_(
                likes.c.user_id == user_id,
                likes.c.event_comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(value) for value in result.scalars()}
