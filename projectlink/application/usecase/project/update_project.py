"""Update project use cases (fields and status)."""

from uuid import UUID

from pydantic import BaseModel, Field

from projectlink.domain.service import ProjectService, UserService
from projectlink.domain.value import ProjectId, ProjectStatus, UserId, parse_uuid

from .get_project import ProjectView, build_project_views


class UpdateProjectRequest(BaseModel):
    """Update project request. Unset fields are left unchanged."""

    user_id: str  # From authenticated user
    project_id: str
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=2000)
    long_description: str | None = Field(default=None, max_length=20000)
    tags: list[str] | None = None
    github_url: str | None = None
    demo_url: str | None = None
    images: list[str] | None = None
    progress: int | None = Field(default=None, ge=0, le=100)


class UpdateProjectUseCase:
    """Use case for editing a project (author only)."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize update project use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: UpdateProjectRequest) -> ProjectView:
        """Execute update project flow.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: If the user is not the author
        """
        project_id = ProjectId(parse_uuid(request.project_id, "Project"))
        changes = request.model_dump(
            exclude={"user_id", "project_id"}, exclude_unset=True
        )
        project = await self.project_service.update_project(
            UserId(UUID(request.user_id)), project_id, changes
        )
        views = await build_project_views([project], self.user_service)
        return views[0]


class SetProjectStatusRequest(BaseModel):
    """Set project status request."""

    user_id: str
    project_id: str
    status: ProjectStatus


class SetProjectStatusUseCase:
    """Use case for setting a project's status explicitly (author only)."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize set project status use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: SetProjectStatusRequest) -> ProjectView:
        """Execute set status flow."""
        project = await self.project_service.set_status(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
            request.status,
        )
        views = await build_project_views([project], self.user_service)
        return views[0]
