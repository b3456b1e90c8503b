"""Domain value types for ProjectLink."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle status of a project."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"

    @classmethod
    def from_progress(cls, progress: int) -> "ProjectStatus":
        """Derive status from a progress percentage."""
        return cls.COMPLETED if progress >= 100 else cls.ACTIVE


class ActivityType(str, Enum):
    """Kind of event shown in a user's feed."""

    FOLLOW = "follow"
    LIKE = "like"
    COMMENT = "comment"


class CollaboratorAction(str, Enum):
    """Collaborator list mutation."""

    ADD = "add"
    REMOVE = "remove"
