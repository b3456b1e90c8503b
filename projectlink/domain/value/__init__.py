"""Domain value objects for ProjectLink."""

from projectlink.domain.value.identifiers import (
    CommentId,
    ProjectId,
    UserId,
    parse_uuid,
)
from projectlink.domain.value.types import (
    ActivityType,
    CollaboratorAction,
    ProjectStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "CommentId",
    "parse_uuid",
    # Types
    "ActivityType",
    "CollaboratorAction",
    "ProjectStatus",
]
