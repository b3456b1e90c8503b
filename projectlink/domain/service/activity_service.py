"""Activity feed and notification derivation."""

from typing import Optional, Sequence

import logfire

from projectlink.config import ActivitySettings
from projectlink.domain.model import (
    Activity,
    Dashboard,
    DashboardStats,
    Notification,
    Project,
    User,
)
from projectlink.domain.repository import NotificationReadRepository, ProjectRepository
from projectlink.domain.value import ActivityType, UserId

from .base import Service
from .user_service import UserService


class ActivityService(Service):
    """Derives a user's activity feed and notifications on read.

    Nothing is written when a like, comment or follow happens; the feed is
    rebuilt from the user's projects and followers every time it is asked
    for. Only read markers are persisted.
    """

    def __init__(
        self,
        user_service: UserService,
        project_repository: ProjectRepository,
        notification_read_repository: NotificationReadRepository,
        activity_settings: ActivitySettings,
    ) -> None:
        """Initialize activity service.

        Args:
            user_service: User service (recipient and actor lookups)
            project_repository: Project repository
            notification_read_repository: Read marker repository
            activity_settings: Feed and notification limits
        """
        self.user_service = user_service
        self.project_repository = project_repository
        self.notification_read_repository = notification_read_repository
        self.settings = activity_settings

    async def _load(self, user_id: UserId) -> tuple[User, list[Project]]:
        user = await self.user_service.get_by_id(user_id)
        projects = await self.project_repository.find_by_author(user_id)
        return user, projects

    async def _derive(self, user: User, projects: Sequence[Project]) -> list[Activity]:
        # (id, type, actor_id, project, content, timestamp) in scan order
        raw = []
        for project in projects:
            for like in project.likes:
                raw.append(
                    (
                        f"{project.id}-like-{like.user_id}",
                        ActivityType.LIKE,
                        like.user_id,
                        project,
                        None,
                        like.created_at,
                    )
                )
            for comment in project.comments:
                raw.append(
                    (
                        f"{project.id}-comment-{comment.id}",
                        ActivityType.COMMENT,
                        comment.user_id,
                        project,
                        comment.text,
                        comment.created_at,
                    )
                )
        for edge in user.followers:
            raw.append(
                (
                    f"follow-{edge.user_id}",
                    ActivityType.FOLLOW,
                    edge.user_id,
                    None,
                    None,
                    edge.created_at,
                )
            )

        # No notifications about the user's own actions
        raw = [event for event in raw if event[2] != user.id]

        profiles = await self.user_service.get_public_profiles(
            [event[2] for event in raw]
        )

        activities: list[Activity] = []
        seen: set[tuple] = set()
        for activity_id, type_, actor_id, project, content, timestamp in raw:
            activity = Activity(
                id=activity_id,
                type=type_,
                actor=profiles[actor_id],
                project_id=project.id if project else None,
                project_title=project.title if project else None,
                content=content,
                timestamp=timestamp,
            )
            if activity.dedup_key in seen:
                continue
            seen.add(activity.dedup_key)
            activities.append(activity)

        # sorted() is stable, so equal timestamps keep scan order
        return sorted(activities, key=lambda a: a.timestamp, reverse=True)

    async def derive_activities(self, user_id: UserId) -> list[Activity]:
        """All activities directed at a user, newest first.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("activity_service.derive_activities", user_id=str(user_id)):
            user, projects = await self._load(user_id)
            activities = await self._derive(user, projects)
            logfire.info(
                "Activities derived", user_id=str(user_id), count=len(activities)
            )
            return activities

    async def _notifications(
        self, user_id: UserId, activities: Sequence[Activity]
    ) -> tuple[list[Notification], int]:
        read_ids = await self.notification_read_repository.find_read_ids(
            user_id, [a.id for a in activities]
        )
        notifications = [
            Notification(
                id=a.id,
                type=a.type,
                message=a.render_message(),
                read=a.id in read_ids,
                timestamp=a.timestamp,
                project_id=a.project_id,
            )
            for a in activities
        ]
        unread = sum(1 for n in notifications if not n.read)
        return notifications, unread

    async def list_notifications(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> tuple[list[Notification], int]:
        """Newest notifications for a user.

        Args:
            user_id: Recipient
            limit: Page size (defaults to the configured notification limit)

        Returns:
            Up to ``limit`` notifications and the total unread count
        """
        with logfire.span("activity_service.list_notifications", user_id=str(user_id)):
            limit = limit or self.settings.notification_limit
            activities = await self.derive_activities(user_id)
            notifications, unread = await self._notifications(user_id, activities)
            return notifications[:limit], unread

    async def mark_read(self, user_id: UserId, activity_ids: Sequence[str]) -> int:
        """Mark notifications read.

        IDs that do not belong to the user's current feed are ignored.

        Returns:
            Unread count after the change
        """
        with logfire.span(
            "activity_service.mark_read", user_id=str(user_id), count=len(activity_ids)
        ):
            activities = await self.derive_activities(user_id)
            known = {a.id for a in activities}
            to_mark = [i for i in dict.fromkeys(activity_ids) if i in known]
            if to_mark:
                await self.notification_read_repository.mark_read(user_id, to_mark)
            _, unread = await self._notifications(user_id, activities)
            logfire.info(
                "Notifications marked read",
                user_id=str(user_id),
                marked=len(to_mark),
                unread=unread,
            )
            return unread

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every current notification read.

        Returns:
            Unread count after the change (always 0)
        """
        with logfire.span("activity_service.mark_all_read", user_id=str(user_id)):
            activities = await self.derive_activities(user_id)
            if activities:
                await self.notification_read_repository.mark_read(
                    user_id, [a.id for a in activities]
                )
            logfire.info(
                "All notifications marked read",
                user_id=str(user_id),
                count=len(activities),
            )
            return 0

    @staticmethod
    def compute_stats(user: User, projects: Sequence[Project]) -> DashboardStats:
        """Raw totals over the user's projects; self-likes included."""
        return DashboardStats(
            total_projects=len(projects),
            total_likes=sum(len(p.likes) for p in projects),
            total_comments=sum(len(p.comments) for p in projects),
            total_followers=len(user.followers),
        )

    async def build_dashboard(self, user_id: UserId) -> Dashboard:
        """Activities, notifications and stats for a user's dashboard.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("activity_service.build_dashboard", user_id=str(user_id)):
            user, projects = await self._load(user_id)
            activities = await self._derive(user, projects)
            notifications, unread = await self._notifications(user_id, activities)

            dashboard = Dashboard(
                activities=activities[: self.settings.feed_limit],
                notifications=notifications[: self.settings.notification_limit],
                unread_count=unread,
                stats=self.compute_stats(user, projects),
            )
            logfire.info(
                "Dashboard built",
                user_id=str(user_id),
                activities=len(dashboard.activities),
                unread=unread,
            )
            return dashboard
