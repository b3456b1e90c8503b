"""Activity feed read models.

Activities and notifications are derived on read from projects and the
follow graph; neither is persisted. Only the read state of a notification
is stored, keyed by the activity's stable id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from projectlink.domain.model.common import DomainModel
from projectlink.domain.model.user import PublicProfile
from projectlink.domain.value import ActivityType, ProjectId


class Activity(DomainModel):
    """A single like, comment or follow event directed at a user."""

    id: str
    type: ActivityType
    actor: PublicProfile
    project_id: Optional[ProjectId] = None
    project_title: Optional[str] = None
    content: Optional[str] = None
    timestamp: datetime

    @property
    def dedup_key(self) -> tuple:
        """Identity of the underlying event, independent of its stored id."""
        return (
            self.type,
            self.project_id,
            self.actor.id,
            self.content if self.type == ActivityType.COMMENT else None,
        )

    def render_message(self) -> str:
        """Human-readable notification text."""
        if self.type == ActivityType.LIKE:
            return f'{self.actor.name} liked your project "{self.project_title}"'
        if self.type == ActivityType.COMMENT:
            return (
                f'{self.actor.name} commented on your project "{self.project_title}": '
                f'"{self.content}"'
            )
        return f"{self.actor.name} started following you"


class Notification(DomainModel):
    """A derived notification with its read state."""

    id: str
    type: ActivityType
    message: str
    read: bool = False
    timestamp: datetime
    project_id: Optional[ProjectId] = None


class DashboardStats(DomainModel):
    """Totals over a user's own projects and followers."""

    total_projects: int = Field(default=0, ge=0)
    total_likes: int = Field(default=0, ge=0)
    total_comments: int = Field(default=0, ge=0)
    total_followers: int = Field(default=0, ge=0)


class Dashboard(DomainModel):
    """Everything the dashboard shows for one user."""

    activities: list[Activity]
    notifications: list[Notification]
    unread_count: int
    stats: DashboardStats
