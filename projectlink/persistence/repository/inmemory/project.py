"""In-memory project repository for testing."""

from typing import Optional, Sequence

from projectlink.domain.model.project import Project
from projectlink.domain.repository.project import ProjectRepository
from projectlink.domain.value import ProjectId, UserId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}

    async def find_by_id(
        self, project_id: ProjectId, for_update: bool = False
    ) -> Optional[Project]:
        """Find a project by ID."""
        return self._projects.get(project_id)

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        author_id: Optional[UserId] = None,
    ) -> list[Project]:
        """Find projects matching the filters, newest first."""
        projects = list(self._projects.values())

        if author_id is not None:
            projects = [p for p in projects if p.author_id == author_id]
        if search:
            needle = search.lower()
            projects = [
                p
                for p in projects
                if needle in p.title.lower()
                or needle in p.description.lower()
                or needle in (p.long_description or "").lower()
            ]
        if tags:
            wanted = set(tags)
            projects = [p for p in projects if wanted.intersection(p.tags)]

        return sorted(projects, key=lambda p: p.created_at, reverse=True)

    async def find_by_author(self, author_id: UserId) -> list[Project]:
        """Find all projects by an author, newest first."""
        return await self.find_all(author_id=author_id)

    async def save(self, project: Project) -> Project:
        """Save or update a project; the stored view count is kept on update."""
        existing = self._projects.get(project.id)
        if existing:
            project = project.model_copy(update={"views": existing.views})
        self._projects[project.id] = project
        return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project."""
        return self._projects.pop(project_id, None) is not None

    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every project by an author."""
        doomed = [pid for pid, p in self._projects.items() if p.author_id == author_id]
        for project_id in doomed:
            del self._projects[project_id]
        return len(doomed)

    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Increment the view counter."""
        project = self._projects.get(project_id)
        if not project:
            return None
        updated = project.model_copy(update={"views": project.views + 1})
        self._projects[project_id] = updated
        return updated.views
