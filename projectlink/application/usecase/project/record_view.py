"""Record project view use case."""

from pydantic import BaseModel

from projectlink.domain.service import ProjectService
from projectlink.domain.value import ProjectId, parse_uuid


class RecordViewRequest(BaseModel):
    """Record view request."""

    project_id: str
    viewer_key: str  # user:<id> or ip:<addr>


class RecordViewResponse(BaseModel):
    """View count after the call."""

    views: int


class RecordViewUseCase:
    """Use case for counting a project view with per-viewer cooldown."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize record view use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: RecordViewRequest) -> RecordViewResponse:
        """Execute record view flow."""
        views = await self.project_service.record_view(
            ProjectId(parse_uuid(request.project_id, "Project")),
            request.viewer_key,
        )
        return RecordViewResponse(views=views)
