"""List projects use case."""

import logfire
from pydantic import BaseModel

from projectlink.domain.error import NotFoundError, ValidationError
from projectlink.domain.service import ProjectService, UserService
from projectlink.domain.value import UserId, parse_uuid

from .get_project import ProjectView, build_project_views


class ListProjectsRequest(BaseModel):
    """List projects request."""

    search: str | None = None
    tags: list[str] | None = None
    author_id: str | None = None


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectView]


class ListProjectsUseCase:
    """Use case for listing projects with search and filters."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize list projects use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """Execute list projects flow.

        Raises:
            ValidationError: If the author filter is not a valid ID
        """
        with logfire.span(
            "list_projects.execute",
            search=request.search,
            tags=request.tags,
            author_id=request.author_id,
        ):
            author_id = None
            if request.author_id:
                try:
                    author_id = UserId(parse_uuid(request.author_id.strip(), "User"))
                except NotFoundError:
                    raise ValidationError("Invalid author ID")

            projects = await self.project_service.list_projects(
                search=request.search,
                tags=request.tags,
                author_id=author_id,
            )
            views = await build_project_views(projects, self.user_service)
            return ListProjectsResponse(projects=views)
