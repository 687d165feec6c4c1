"""SQLAlchemy table definitions for Banter.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity side of the platform)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# BLOGS TABLE (owned by the authoring side of the platform)
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "status",
        Enum("draft", "published", "scheduled", name="blog_status", create_type=False),
        nullable=False,
        server_default="draft",
    ),
    Column("comments_enabled", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "blog_id",
        UUID(as_uuid=True),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # No FK: replies outlive their parent's removal and become orphans
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    # No FK: comments keep rendering after their author is removed
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("author_name", String(255), nullable=True),  # Snapshot at write time
    Column("author_avatar_url", Text, nullable=True),  # Snapshot at write time
    Column("content", Text, nullable=False, server_default=""),
    Column("attachments", JSONB, nullable=True),  # NULL on legacy rows
    Column(
        "likes",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "status",
        Enum("active", "deleted", "hidden", name="comment_status", create_type=False),
        nullable=False,
        server_default="active",
    ),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_blog_created", comments_table.c.blog_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_status", comments_table.c.status)
