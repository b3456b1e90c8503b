"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Embedded sequences
(follow edges, likes, comments) round-trip through JSON-mode dumps so that
UUIDs and datetimes are stored as strings inside JSONB.
"""

from typing import Any, Dict
from uuid import UUID

from projectlink.domain.model import Comment, FollowEdge, LikeEdge, Project, User
from projectlink.domain.value import ProjectId, ProjectStatus, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _edges(items: list[Dict[str, Any]] | None, owner_id: UUID) -> list[FollowEdge]:
    # Self references cannot be represented in the domain model
    edges = [FollowEdge.model_validate(item) for item in items or []]
    return [edge for edge in edges if edge.user_id != owner_id]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    user_id = UserId(_uuid(row["id"]))
    return User(
        id=user_id,
        name=row["name"],
        email=row["email"],
        institution=row.get("institution") or "",
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio") or "",
        skills=list(row.get("skills") or []),
        followers=_edges(row.get("followers"), user_id),
        following=_edges(row.get("following"), user_id),
        is_admin=row.get("is_admin", False),
        banned=row.get("banned", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(exclude={"followers", "following"})
    data["followers"] = [edge.model_dump(mode="json") for edge in user.followers]
    data["following"] = [edge.model_dump(mode="json") for edge in user.following]
    return data


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        long_description=row.get("long_description"),
        tags=list(row.get("tags") or []),
        github_url=row.get("github_url"),
        demo_url=row.get("demo_url"),
        images=list(row.get("images") or []),
        author_id=UserId(_uuid(row["author_id"])),
        progress=row["progress"],
        status=ProjectStatus(row["status"]),
        views=row["views"],
        collaborators=[UserId(_uuid(c)) for c in row.get("collaborators") or []],
        bookmarks=[UserId(_uuid(b)) for b in row.get("bookmarks") or []],
        likes=[LikeEdge.model_validate(item) for item in row.get("likes") or []],
        comments=[Comment.model_validate(item) for item in row.get("comments") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict.

    Args:
        project: Project domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = project.model_dump(exclude={"likes", "comments"})
    data["status"] = project.status.value
    data["likes"] = [edge.model_dump(mode="json") for edge in project.likes]
    data["comments"] = [comment.model_dump(mode="json") for comment in project.comments]
    return data
