"""Delete project use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.service import ProjectService
from projectlink.domain.value import ProjectId, UserId, parse_uuid


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    user_id: str
    project_id: str


class DeleteProjectResponse(BaseModel):
    """Delete project response."""

    message: str = "Project deleted"


class DeleteProjectUseCase:
    """Use case for deleting a project (author only)."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize delete project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> DeleteProjectResponse:
        """Execute delete project flow."""
        await self.project_service.delete_project(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
        )
        return DeleteProjectResponse()
