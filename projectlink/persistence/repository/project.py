"""PostgreSQL implementation of Project repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from projectlink.domain.model import Project
from projectlink.domain.repository import ProjectRepository
from projectlink.domain.value import ProjectId, UserId
from projectlink.persistence.mappers import project_to_dict, row_to_project
from projectlink.persistence.tables import projects_table


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, project_id: ProjectId, for_update: bool = False
    ) -> Optional[Project]:
        """Find a project by ID."""
        with logfire.span("project_repository.find_by_id", project_id=str(project_id)):
            stmt = select(projects_table).where(projects_table.c.id == project_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_project(dict(row)) if row else None

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        author_id: Optional[UserId] = None,
    ) -> list[Project]:
        """Find projects matching the filters, newest first."""
        with logfire.span("project_repository.find_all", search=search, tags=tags):
            stmt = select(projects_table)

            if author_id is not None:
                stmt = stmt.where(projects_table.c.author_id == author_id)
            if search:
                pattern = f"%{_escape_like(search)}%"
                stmt = stmt.where(
                    or_(
                        projects_table.c.title.ilike(pattern, escape="\\"),
                        projects_table.c.description.ilike(pattern, escape="\\"),
                        projects_table.c.long_description.ilike(pattern, escape="\\"),
                    )
                )
            if tags:
                stmt = stmt.where(projects_table.c.tags.overlap(list(tags)))

            stmt = stmt.order_by(projects_table.c.created_at.desc())
            result = await self.session.execute(stmt)
            return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def find_by_author(self, author_id: UserId) -> list[Project]:
        """Find all projects by an author, newest first."""
        return await self.find_all(author_id=author_id)

    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        ``views`` is only written on insert; the counter is owned by
        ``increment_views``.
        """
        with logfire.span("project_repository.save", project_id=str(project.id)):
            exists = await self.session.execute(
                select(projects_table.c.id).where(projects_table.c.id == project.id)
            )

            project_dict = project_to_dict(project)

            if exists.first():
                project_dict.pop("views")
                stmt = (
                    projects_table.update()
                    .where(projects_table.c.id == project.id)
                    .values(**project_dict)
                )
            else:
                stmt = projects_table.insert().values(**project_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project."""
        result = await self.session.execute(
            delete(projects_table).where(projects_table.c.id == project_id)
        )
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every project by an author."""
        result = await self.session.execute(
            delete(projects_table).where(projects_table.c.author_id == author_id)
        )
        await self.session.flush()
        return result.rowcount or 0

    async def increment_views(self, project_id: ProjectId) -> Optional[int]:
        """Atomically increment the view counter.

        Uses SQL-level increment to avoid race conditions.
        """
        with logfire.span(
            "project_repository.increment_views", project_id=str(project_id)
        ):
            stmt = (
                update(projects_table)
                .where(projects_table.c.id == project_id)
                .values(views=projects_table.c.views + 1)
                .returning(projects_table.c.views)
            )
            result = await self.session.execute(stmt)
            views = result.scalar()
            await self.session.flush()
            return views
