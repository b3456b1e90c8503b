"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from projectlink.domain.model.project import Project
from projectlink.domain.value import ProjectId, UserId


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    A project is stored as one document including its likes, bookmarks,
    collaborators and comments; ``save`` replaces all of them at once.
    """

    @abstractmethod
    async def find_by_id(
        self, project_id: ProjectId, for_update: bool = False
    ) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier
            for_update: Lock the record until the current transaction ends

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        author_id: Optional[UserId] = None,
    ) -> list[Project]:
        """Find projects matching the given filters, newest first.

        Args:
            search: Case-insensitive substring of title, description
                or long description
            tags: Match projects carrying any of these (lowercase) tags
            author_id: Only projects by this author

        Returns:
            Matching projects ordered by creation time descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> list[Project]:
        """Find all projects by an author, newest first."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project.

        Returns:
            True if a project was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every project by an author.

        Returns:
            Number of deleted projects
        """
        pass

    @abstractmethod
    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Atomically increment a project's view counter.

        Args:
            project_id: The project's unique identifier

        Returns:
            New view count, or None if the project does not exist
        """
        pass
