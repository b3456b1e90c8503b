"""Domain model entities for ProjectLink."""

from projectlink.domain.model.activity import (
    Activity,
    Dashboard,
    DashboardStats,
    Notification,
)
from projectlink.domain.model.comment import Comment
from projectlink.domain.model.project import LikeEdge, Project
from projectlink.domain.model.user import FollowEdge, PublicProfile, User

__all__ = [
    "User",
    "FollowEdge",
    "PublicProfile",
    "Project",
    "LikeEdge",
    "Comment",
    "Activity",
    "Notification",
    "DashboardStats",
    "Dashboard",
]
