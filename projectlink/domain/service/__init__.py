"""Domain services."""

from .activity_service import ActivityService
from .admin_service import AdminService, PlatformStats
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .project_service import ProjectService
from .user_service import FollowCounts, UserService
from .view_cache import ViewCache

__all__ = [
    "ActivityService",
    "AdminService",
    "CommentService",
    "FollowCounts",
    "JWTService",
    "PlatformStats",
    "ProjectService",
    "Service",
    "UserService",
    "ViewCache",
]
