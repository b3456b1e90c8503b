"""Project domain service."""

from datetime import datetime
from typing import Any, Optional, Sequence
from uuid import uuid4

import logfire

from projectlink.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    SelfReferenceError,
)
from projectlink.domain.model import LikeEdge, Project
from projectlink.domain.model.common import utcnow
from projectlink.domain.model.project import normalize_tags
from projectlink.domain.repository import ProjectRepository
from projectlink.domain.value import (
    CollaboratorAction,
    ProjectId,
    ProjectStatus,
    UserId,
)

from .base import Service
from .user_service import UserService
from .view_cache import ViewCache

EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "long_description",
        "tags",
        "github_url",
        "demo_url",
        "images",
        "progress",
    }
)


class ProjectService(Service):
    """Domain service for the project lifecycle and project-level social actions."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        user_service: UserService,
        view_cache: ViewCache,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            user_service: User service (author and collaborator lookups)
            view_cache: Process-wide view deduplication cache
        """
        self.project_repository = project_repository
        self.user_service = user_service
        self.view_cache = view_cache

    async def get_by_id(self, project_id: ProjectId, for_update: bool = False) -> Project:
        """Get project by ID.

        Raises:
            NotFoundError: If project not found
        """
        with logfire.span("project_service.get_by_id", project_id=str(project_id)):
            project = await self.project_repository.find_by_id(
                project_id, for_update=for_update
            )
            if not project:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return project

    async def list_projects(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        author_id: Optional[UserId] = None,
    ) -> list[Project]:
        """List projects, newest first.

        Args:
            search: Case-insensitive substring filter
            tags: Any-of tag filter (normalized before matching)
            author_id: Author filter

        Returns:
            Matching projects
        """
        with logfire.span("project_service.list_projects", search=search):
            search = search.strip() if search else None
            normalized_tags = normalize_tags(list(tags)) if tags else None
            projects = await self.project_repository.find_all(
                search=search or None,
                tags=normalized_tags or None,
                author_id=author_id,
            )
            logfire.info("Projects listed", count=len(projects))
            return projects

    async def create_project(self, author_id: UserId, fields: dict[str, Any]) -> Project:
        """Create a project owned by ``author_id``.

        Args:
            author_id: Author of the project
            fields: Editable project fields (title and description required)

        Returns:
            Created project

        Raises:
            NotFoundError: If the author does not exist
        """
        with logfire.span("project_service.create_project", author_id=str(author_id)):
            await self.user_service.get_by_id(author_id)

            data = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
            progress = data.get("progress")
            if progress is None:
                data["progress"] = 0
            now = utcnow()
            project = Project.model_validate(
                {
                    **data,
                    "id": uuid4(),
                    "author_id": author_id,
                    "status": ProjectStatus.from_progress(data["progress"]),
                    "created_at": now,
                    "updated_at": now,
                }
            )

            saved = await self.project_repository.save(project)
            logfire.info(
                "Project created",
                project_id=str(saved.id),
                author_id=str(author_id),
                title=saved.title,
            )
            return saved

    def _require_author(self, project: Project, user_id: UserId) -> None:
        if project.author_id != user_id:
            logfire.warn(
                "Non-author attempted to modify project",
                project_id=str(project.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("project", str(project.id), str(user_id))

    async def update_project(
        self, user_id: UserId, project_id: ProjectId, changes: dict[str, Any]
    ) -> Project:
        """Apply field updates to a project (author only).

        Updating ``progress`` re-derives ``status``.

        Raises:
            NotFoundError: If project not found
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "project_service.update_project",
            project_id=str(project_id),
            user_id=str(user_id),
        ):
            project = await self.get_by_id(project_id, for_update=True)
            self._require_author(project, user_id)

            update = {
                k: v
                for k, v in changes.items()
                if k in EDITABLE_FIELDS and v is not None
            }
            if "progress" in update:
                update["status"] = ProjectStatus.from_progress(update["progress"])
            update["updated_at"] = utcnow()

            # Re-validate so tag normalization and bounds apply
            updated = Project.model_validate({**project.model_dump(), **update})
            saved = await self.project_repository.save(updated)
            logfire.info(
                "Project updated",
                project_id=str(project_id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def set_status(
        self, user_id: UserId, project_id: ProjectId, status: ProjectStatus
    ) -> Project:
        """Set status explicitly (author only).

        Holds until the next progress update.
        """
        with logfire.span(
            "project_service.set_status",
            project_id=str(project_id),
            status=status.value,
        ):
            project = await self.get_by_id(project_id, for_update=True)
            self._require_author(project, user_id)

            updated = project.model_copy(
                update={"status": status, "updated_at": utcnow()}
            )
            saved = await self.project_repository.save(updated)
            logfire.info(
                "Project status set", project_id=str(project_id), status=status.value
            )
            return saved

    async def delete_project(self, user_id: UserId, project_id: ProjectId) -> None:
        """Delete a project with its embedded likes and comments (author only).

        Raises:
            NotFoundError: If project not found
            NotAuthorizedError: If user is not the author
        """
        with logfire.span(
            "project_service.delete_project",
            project_id=str(project_id),
            user_id=str(user_id),
        ):
            project = await self.get_by_id(project_id, for_update=True)
            self._require_author(project, user_id)

            await self.project_repository.delete(project_id)
            self.view_cache.forget_project(project_id)
            logfire.info("Project deleted", project_id=str(project_id))

    async def like(self, user_id: UserId, project_id: ProjectId) -> int:
        """Like a project.

        Returns:
            Like count after the change

        Raises:
            NotFoundError: If project not found
            AlreadyLikedError: If the user already liked the project
        """
        with logfire.span(
            "project_service.like", project_id=str(project_id), user_id=str(user_id)
        ):
            project = await self.get_by_id(project_id, for_update=True)
            if project.has_liked(user_id):
                logfire.warn(
                    "Duplicate like attempt",
                    project_id=str(project_id),
                    user_id=str(user_id),
                )
                raise AlreadyLikedError(str(user_id), str(project_id))

            updated = project.model_copy(
                update={
                    "likes": [*project.likes, LikeEdge(user_id=user_id)],
                    "updated_at": utcnow(),
                }
            )
            saved = await self.project_repository.save(updated)
            logfire.info(
                "Project liked",
                project_id=str(project_id),
                user_id=str(user_id),
                likes=len(saved.likes),
            )
            return len(saved.likes)

    async def unlike(self, user_id: UserId, project_id: ProjectId) -> int:
        """Remove a user's like. A project that was not liked is unchanged.

        Returns:
            Like count after the change
        """
        with logfire.span(
            "project_service.unlike", project_id=str(project_id), user_id=str(user_id)
        ):
            project = await self.get_by_id(project_id, for_update=True)
            updated = project.model_copy(
                update={
                    "likes": [e for e in project.likes if e.user_id != user_id],
                    "updated_at": utcnow(),
                }
            )
            saved = await self.project_repository.save(updated)
            logfire.info(
                "Project unliked",
                project_id=str(project_id),
                user_id=str(user_id),
                likes=len(saved.likes),
            )
            return len(saved.likes)

    async def toggle_bookmark(self, user_id: UserId, project_id: ProjectId) -> bool:
        """Flip a user's bookmark on a project.

        Returns:
            True if the project is bookmarked after the call
        """
        with logfire.span(
            "project_service.toggle_bookmark",
            project_id=str(project_id),
            user_id=str(user_id),
        ):
            project = await self.get_by_id(project_id, for_update=True)
            if user_id in project.bookmarks:
                bookmarks = [b for b in project.bookmarks if b != user_id]
                bookmarked = False
            else:
                bookmarks = [*project.bookmarks, user_id]
                bookmarked = True

            await self.project_repository.save(
                project.model_copy(
                    update={"bookmarks": bookmarks, "updated_at": utcnow()}
                )
            )
            logfire.info(
                "Bookmark toggled",
                project_id=str(project_id),
                user_id=str(user_id),
                bookmarked=bookmarked,
            )
            return bookmarked

    async def set_collaborator(
        self,
        user_id: UserId,
        project_id: ProjectId,
        target_id: UserId,
        action: CollaboratorAction,
    ) -> list[UserId]:
        """Add or remove a collaborator (author only).

        Adding is idempotent; removing a non-collaborator is a no-op.

        Returns:
            Collaborator IDs after the change

        Raises:
            NotFoundError: If the project (or, on add, the target user) is missing
            NotAuthorizedError: If user is not the author
            SelfReferenceError: If the author adds themself
        """
        with logfire.span(
            "project_service.set_collaborator",
            project_id=str(project_id),
            target_id=str(target_id),
            action=action.value,
        ):
            project = await self.get_by_id(project_id, for_update=True)
            self._require_author(project, user_id)

            collaborators = list(project.collaborators)
            if action == CollaboratorAction.ADD:
                if target_id == project.author_id:
                    raise SelfReferenceError("The author cannot be a collaborator")
                await self.user_service.get_by_id(target_id)
                if target_id not in collaborators:
                    collaborators.append(target_id)
            else:
                collaborators = [c for c in collaborators if c != target_id]

            if collaborators != project.collaborators:
                await self.project_repository.save(
                    project.model_copy(
                        update={"collaborators": collaborators, "updated_at": utcnow()}
                    )
                )
            logfire.info(
                "Collaborators updated",
                project_id=str(project_id),
                count=len(collaborators),
            )
            return collaborators

    async def record_view(
        self,
        project_id: ProjectId,
        viewer_key: str,
        now: Optional[datetime] = None,
    ) -> int:
        """Count a view unless the viewer was counted within the cooldown.

        Args:
            project_id: Viewed project
            viewer_key: ``user:<id>`` or ``ip:<addr>``
            now: Current time (defaults to UTC now)

        Returns:
            View count after the call

        Raises:
            NotFoundError: If project not found
        """
        with logfire.span("project_service.record_view", project_id=str(project_id)):
            project = await self.get_by_id(project_id)

            if not self.view_cache.should_count(viewer_key, project_id, now):
                return project.views

            try:
                views = await self.project_repository.increment_views(project_id)
            except Exception:
                self.view_cache.release(viewer_key, project_id)
                raise
            if views is None:
                self.view_cache.release(viewer_key, project_id)
                # Deleted between the read and the increment
                raise NotFoundError("Project", str(project_id))
            logfire.info("Project view counted", project_id=str(project_id), views=views)
            return views
