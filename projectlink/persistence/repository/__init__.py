"""PostgreSQL repository implementations."""

from projectlink.persistence.repository.notification_read import (
    PostgresNotificationReadRepository,
)
from projectlink.persistence.repository.project import PostgresProjectRepository
from projectlink.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProjectRepository",
    "PostgresNotificationReadRepository",
]
