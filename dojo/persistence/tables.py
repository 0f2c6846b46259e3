"""SQLAlchemy table definitions for the academy API.

These tables match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("role", String(50), nullable=False, server_default="student"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("event_date", Date, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# EVENT COMMENTS TABLE
# ============================================================================
event_comments_table = Table(
    "event_comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "event_id",
        Integer,
        ForeignKey("events.id", ondelete="CASCADE", name="fk_event_comments_event_id"),
        nullable=False,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_event_comments_user_id"),
        nullable=False,
    ),
    Column("comment", Text, nullable=False),
    Column(
        "parent_id",
        Integer,
        ForeignKey(
            "event_comments.id", ondelete="CASCADE", name="fk_event_comments_parent_id"
        ),
        nullable=True,
    ),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index(
    "idx_event_comments_event_root",
    event_comments_table.c.event_id,
    event_comments_table.c.parent_id,
)
Index("idx_event_comments_parent_id", event_comments_table.c.parent_id)
Index("idx_event_comments_created_at", event_comments_table.c.created_at)

# ============================================================================
# EVENT COMMENT LIKES TABLE
# ============================================================================
event_comment_likes_table = Table(
    "event_comment_likes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "event_comment_id",
        Integer,
        ForeignKey(
            "event_comments.id",
            ondelete="CASCADE",
            name="fk_event_comment_likes_comment_id",
        ),
        nullable=False,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_event_comment_likes_user_id"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    # One like per user per comment; toggles rely on this constraint
    UniqueConstraint("event_comment_id", "user_id", name="uq_event_comment_like"),
)

Index("idx_event_comment_likes_user_id", event_comment_likes_table.c.user_id)
