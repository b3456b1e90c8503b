"""Notification read-marker repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from projectlink.domain.value import UserId


class NotificationReadRepository(ABC):
    """Repository for notification read markers.

    Notifications are derived, so only the fact that a user has seen a
    given activity id is stored.
    """

    @abstractmethod
    async def find_read_ids(
        self, user_id: UserId, activity_ids: Sequence[str]
    ) -> set[str]:
        """Return the subset of ``activity_ids`` the user has read.

        Args:
            user_id: The reader
            activity_ids: Candidate activity IDs

        Returns:
            IDs that carry a read marker
        """
        pass

    @abstractmethod
    async def mark_read(self, user_id: UserId, activity_ids: Sequence[str]) -> None:
        """Record read markers. Already-read IDs are left untouched."""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove every read marker owned by a user."""
        pass
