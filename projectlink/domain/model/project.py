"""Project aggregate root.

A project is a single document: likes, bookmarks, collaborators and
comments are embedded and written together with the project itself.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from projectlink.domain.model.comment import Comment
from projectlink.domain.model.common import DomainModel, utcnow
from projectlink.domain.value import CommentId, ProjectId, ProjectStatus, UserId


def normalize_tags(tags: list[str]) -> list[str]:
    """Lowercase, trim and de-duplicate tags, keeping first-seen order."""
    seen: list[str] = []
    for tag in tags:
        normalized = tag.strip().lower()
        if normalized and normalized not in seen:
            seen.append(normalized)
    return seen


class LikeEdge(DomainModel):
    """A user's like on a project, stamped with when it was given."""

    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class Project(DomainModel):
    """Project aggregate root.

    Business rules:
    - ``author_id`` never changes after creation
    - ``status`` is derived from ``progress`` whenever progress is updated
    - a user likes a project at most once
    - the author is never listed as a collaborator
    """

    id: ProjectId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    long_description: Optional[str] = Field(default=None, max_length=20000)
    tags: list[str] = Field(default_factory=list)
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    author_id: UserId
    progress: int = Field(default=0, ge=0, le=100)
    status: ProjectStatus = ProjectStatus.ACTIVE
    views: int = Field(default=0, ge=0)
    collaborators: list[UserId] = Field(default_factory=list)
    bookmarks: list[UserId] = Field(default_factory=list)
    likes: list[LikeEdge] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return normalize_tags(v)

    @property
    def like_ids(self) -> list[UserId]:
        return [edge.user_id for edge in self.likes]

    def has_liked(self, user_id: UserId) -> bool:
        return any(edge.user_id == user_id for edge in self.likes)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None
