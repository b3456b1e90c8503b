"""In-memory notification read-marker repository for testing."""

from typing import Sequence

from projectlink.domain.repository.notification_read import NotificationReadRepository
from projectlink.domain.value import UserId


class InMemoryNotificationReadRepository(NotificationReadRepository):
    """In-memory implementation of NotificationReadRepository for testing."""

    def __init__(self) -> None:
        self._reads: dict[UserId, set[str]] = {}

    async def find_read_ids(
        self, user_id: UserId, activity_ids: Sequence[str]
    ) -> set[str]:
        """Return the subset of ``activity_ids`` the user has read."""
        return self._reads.get(user_id, set()).intersection(activity_ids)

    async def mark_read(self, user_id: UserId, activity_ids: Sequence[str]) -> None:
        """Record read markers."""
        self._reads.setdefault(user_id, set()).update(activity_ids)

    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove every read marker owned by a user."""
        self._reads.pop(user_id, None)
