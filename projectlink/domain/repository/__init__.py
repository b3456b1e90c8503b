"""Repository interfaces for ProjectLink domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from projectlink.domain.repository.notification_read import NotificationReadRepository
from projectlink.domain.repository.project import ProjectRepository
from projectlink.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "NotificationReadRepository",
]
