"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from projectlink.config import Settings
from projectlink.domain.model import Comment, FollowEdge, LikeEdge, Project, User
from projectlink.domain.model.common import utcnow
from projectlink.domain.value import CommentId, ProjectId, UserId
from projectlink.util.jwt import create_token


def make_user(
    name: str = "Ada Lovelace",
    email: str | None = None,
    created_at: datetime | None = None,
    **fields,
) -> User:
    """Build a user with sensible defaults."""
    user_id = fields.pop("id", None) or UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=email or f"{user_id.hex[:8]}@example.edu",
        created_at=created_at or utcnow(),
        **fields,
    )


def make_project(
    author_id: UserId,
    title: str = "Campus Map",
    created_at: datetime | None = None,
    **fields,
) -> Project:
    """Build a project with sensible defaults."""
    fields.setdefault("description", "Indoor navigation for the library")
    return Project(
        id=fields.pop("id", None) or ProjectId(uuid4()),
        title=title,
        author_id=author_id,
        created_at=created_at or utcnow(),
        **fields,
    )


def make_comment(
    user_id: UserId, text: str = "Nice work!", minutes_ago: int = 0
) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        user_id=user_id,
        text=text,
        created_at=utcnow() - timedelta(minutes=minutes_ago),
    )


def like(user_id: UserId, minutes_ago: int = 0) -> LikeEdge:
    return LikeEdge(
        user_id=user_id, created_at=utcnow() - timedelta(minutes=minutes_ago)
    )


def follow_edge(user_id: UserId, minutes_ago: int = 0) -> FollowEdge:
    return FollowEdge(
        user_id=user_id, created_at=utcnow() - timedelta(minutes=minutes_ago)
    )


def auth_headers(user_id: UserId, is_admin: bool = False) -> dict[str, str]:
    """Bearer header signed with the configured secret."""
    token = create_token(str(user_id), is_admin, Settings().auth)
    return {"Authorization": f"Bearer {token}"}
