"""initial_schema

Create the ProjectLink schema:
- Users (profile, follow edges as JSONB, admin and ban flags)
- Projects (likes and comments as JSONB, collaborators and bookmarks as arrays)
- Notification reads (read markers for derived notifications)

Revision ID: 3f1c9a27d0b4
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a27d0b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("institution", sa.String(255), nullable=False, server_default=""),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "skills", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column(
            "followers", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "following", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.execute("CREATE INDEX idx_users_created_at ON users(created_at DESC)")

    # ========================================================================
    # PROJECTS
    # ========================================================================
    op.create_table(
        "projects",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(2000), nullable=False),
        sa.Column("long_description", sa.Text(), nullable=True),
        sa.Column(
            "tags", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column("github_url", sa.Text(), nullable=True),
        sa.Column("demo_url", sa.Text(), nullable=True),
        sa.Column(
            "images", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        # No FK: deleting an author is an explicit cascade in the admin service
        sa.Column("author_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "collaborators",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "bookmarks",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("likes", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column(
            "comments", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("progress >= 0 AND progress <= 100", name="progress_range"),
        sa.CheckConstraint(
            "status IN ('active', 'completed', 'on-hold')", name="valid_status"
        ),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
    )
    op.execute("CREATE INDEX idx_projects_created_at ON projects(created_at DESC)")
    op.create_index("idx_projects_author_id", "projects", ["author_id"])
    op.create_index("idx_projects_tags", "projects", ["tags"], postgresql_using="gin")

    # ========================================================================
    # NOTIFICATION READS
    # ========================================================================
    op.create_table(
        "notification_reads",
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("activity_id", sa.String(255), nullable=False),
        sa.Column(
            "read_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id", "activity_id", name="pk_notification_reads"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notification_reads")
    op.drop_index("idx_projects_tags", table_name="projects")
    op.drop_index("idx_projects_author_id", table_name="projects")
    op.execute("DROP INDEX IF EXISTS idx_projects_created_at")
    op.drop_table("projects")
    op.execute("DROP INDEX IF EXISTS idx_users_created_at")
    op.drop_table("users")
