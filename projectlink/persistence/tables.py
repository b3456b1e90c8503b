"""SQLAlchemy table definitions for ProjectLink.

Users and projects are stored document-style: follow edges, likes and
comments live in JSONB arrays inside the owning row, id sets and string
lists in PostgreSQL arrays. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("institution", String(255), nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=False, server_default=""),
    Column("skills", ARRAY(Text), nullable=False, server_default="{}"),
    # [{"user_id": ..., "created_at": ...}, ...]
    Column("followers", JSONB, nullable=False, server_default="[]"),
    Column("following", JSONB, nullable=False, server_default="[]"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("banned", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", String(2000), nullable=False),
    Column("long_description", Text, nullable=True),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("github_url", Text, nullable=True),
    Column("demo_url", Text, nullable=True),
    Column("images", ARRAY(Text), nullable=False, server_default="{}"),
    # Author deletion is an explicit cascade in the admin service
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("progress", Integer, nullable=False, server_default="0"),
    Column("status", String(20), nullable=False, server_default="active"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("collaborators", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("bookmarks", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    # [{"user_id": ..., "created_at": ...}, ...]
    Column("likes", JSONB, nullable=False, server_default="[]"),
    # [{"id": ..., "user_id": ..., "text": ..., "created_at": ...}, ...]
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("progress >= 0 AND progress <= 100", name="progress_range"),
    CheckConstraint(
        "status IN ('active', 'completed', 'on-hold')", name="valid_status"
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_projects_created_at", projects_table.c.created_at.desc())
Index("idx_projects_author_id", projects_table.c.author_id)
Index("idx_projects_tags", projects_table.c.tags, postgresql_using="gin")

# ============================================================================
# NOTIFICATION READS TABLE
# ============================================================================
notification_reads_table = Table(
    "notification_reads",
    metadata,
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column("activity_id", String(255), nullable=False),
    Column(
        "read_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "activity_id", name="pk_notification_reads"),
)
