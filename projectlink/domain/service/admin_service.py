"""Administration domain service."""

from dataclasses import dataclass

import logfire

from projectlink.domain.error import NotAuthorizedError
from projectlink.domain.model import Project, User
from projectlink.domain.model.common import utcnow
from projectlink.domain.repository import (
    NotificationReadRepository,
    ProjectRepository,
    UserRepository,
)
from projectlink.domain.value import UserId

from .base import Service
from .user_service import UserService
from .view_cache import ViewCache


@dataclass
class PlatformStats:
    """Platform-wide totals."""

    total_users: int
    total_projects: int
    total_likes: int
    total_comments: int
    active_users: int  # distinct project authors


class AdminService(Service):
    """Domain service for admin-only operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        notification_read_repository: NotificationReadRepository,
        user_service: UserService,
        view_cache: ViewCache,
    ) -> None:
        """Initialize admin service.

        Args:
            user_repository: User repository
            project_repository: Project repository
            notification_read_repository: Read marker repository
            user_service: User service
            view_cache: View cache (cleared for deleted projects)
        """
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.notification_read_repository = notification_read_repository
        self.user_service = user_service
        self.view_cache = view_cache

    async def require_admin(self, user_id: UserId) -> User:
        """Load a user and check the stored admin flag.

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is not an admin
        """
        user = await self.user_service.get_by_id(user_id)
        if not user.is_admin:
            logfire.warn("Admin access denied", user_id=str(user_id))
            raise NotAuthorizedError("admin", "console", str(user_id))
        return user

    async def stats(self) -> PlatformStats:
        """Totals over every user and project."""
        with logfire.span("admin_service.stats"):
            projects = await self.project_repository.find_all()
            return PlatformStats(
                total_users=await self.user_repository.count(),
                total_projects=len(projects),
                total_likes=sum(len(p.likes) for p in projects),
                total_comments=sum(len(p.comments) for p in projects),
                active_users=len({p.author_id for p in projects}),
            )

    async def list_users(self) -> list[User]:
        """Every user, newest first."""
        return await self.user_repository.find_all()

    async def list_projects(self) -> list[Project]:
        """Every project, newest first."""
        return await self.project_repository.find_all()

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and every trace of them.

        Removes the user's projects, then strips their likes, comments,
        bookmarks, collaborator entries and follow edges from all other
        records, and finally the user and their read markers.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("admin_service.delete_user", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id, for_update=True)

            own_projects = await self.project_repository.find_by_author(user_id)
            deleted_projects = await self.project_repository.delete_by_author(user_id)
            for project in own_projects:
                self.view_cache.forget_project(project.id)

            touched_projects = 0
            for project in await self.project_repository.find_all():
                update = {
                    "likes": [e for e in project.likes if e.user_id != user_id],
                    "comments": [c for c in project.comments if c.user_id != user_id],
                    "bookmarks": [b for b in project.bookmarks if b != user_id],
                    "collaborators": [c for c in project.collaborators if c != user_id],
                }
                if all(update[k] == getattr(project, k) for k in update):
                    continue
                await self.project_repository.save(project.model_copy(update=update))
                touched_projects += 1

            touched_users = 0
            for user in await self.user_repository.find_all():
                if user.id == user_id:
                    continue
                followers = [e for e in user.followers if e.user_id != user_id]
                following = [e for e in user.following if e.user_id != user_id]
                if followers == user.followers and following == user.following:
                    continue
                await self.user_repository.save(
                    user.model_copy(
                        update={
                            "followers": followers,
                            "following": following,
                            "updated_at": utcnow(),
                        }
                    )
                )
                touched_users += 1

            await self.notification_read_repository.delete_by_user(user_id)
            await self.user_repository.delete(user_id)

            logfire.info(
                "User deleted",
                user_id=str(user_id),
                deleted_projects=deleted_projects,
                touched_projects=touched_projects,
                touched_users=touched_users,
            )

    async def set_admin(self, user_id: UserId, is_admin: bool) -> User:
        """Grant or revoke the admin flag."""
        with logfire.span(
            "admin_service.set_admin", user_id=str(user_id), is_admin=is_admin
        ):
            user = await self.user_service.get_by_id(user_id, for_update=True)
            updated = user.model_copy(
                update={"is_admin": is_admin, "updated_at": utcnow()}
            )
            await self.user_repository.save(updated)
            logfire.info("User role updated", user_id=str(user_id), is_admin=is_admin)
            return updated

    async def set_banned(self, user_id: UserId, banned: bool) -> User:
        """Set or clear the banned flag."""
        with logfire.span(
            "admin_service.set_banned", user_id=str(user_id), banned=banned
        ):
            user = await self.user_service.get_by_id(user_id, for_update=True)
            updated = user.model_copy(update={"banned": banned, "updated_at": utcnow()})
            await self.user_repository.save(updated)
            logfire.info("User ban status updated", user_id=str(user_id), banned=banned)
            return updated

    async def reconcile_follow_graph(self) -> int:
        """Repair asymmetric follow edges across all users."""
        return await self.user_service.reconcile_follow_graph()
