"""In-memory repository implementations for testing."""

from .notification_read import InMemoryNotificationReadRepository
from .project import InMemoryProjectRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryNotificationReadRepository",
    "InMemoryProjectRepository",
    "InMemoryUserRepository",
]
