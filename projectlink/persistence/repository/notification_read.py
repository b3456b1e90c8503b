"""PostgreSQL implementation of NotificationRead repository."""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from projectlink.domain.repository import NotificationReadRepository
from projectlink.domain.value import UserId
from projectlink.persistence.tables import notification_reads_table


class PostgresNotificationReadRepository(NotificationReadRepository):
    """PostgreSQL implementation of NotificationReadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_read_ids(
        self, user_id: UserId, activity_ids: Sequence[str]
    ) -> set[str]:
        """Return the subset of ``activity_ids`` the user has read."""
        if not activity_ids:
            return set()
        stmt = select(notification_reads_table.c.activity_id).where(
            notification_reads_table.c.user_id == user_id,
            notification_reads_table.c.activity_id.in_(list(activity_ids)),
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def mark_read(self, user_id: UserId, activity_ids: Sequence[str]) -> None:
        """Record read markers, ignoring ones that already exist."""
        if not activity_ids:
            return
        stmt = (
            insert(notification_reads_table)
            .values(
                [
                    {"user_id": user_id, "activity_id": activity_id}
                    for activity_id in activity_ids
                ]
            )
            .on_conflict_do_nothing(index_elements=["user_id", "activity_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_user(self, user_id: UserId) -> None:
        """Remove every read marker owned by a user."""
        await self.session.execute(
            delete(notification_reads_table).where(
                notification_reads_table.c.user_id == user_id
            )
        )
        await self.session.flush()
