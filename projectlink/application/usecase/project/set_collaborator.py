"""Set collaborator use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.model import PublicProfile
from projectlink.domain.service import ProjectService, UserService
from projectlink.domain.value import CollaboratorAction, ProjectId, UserId, parse_uuid


class SetCollaboratorRequest(BaseModel):
    """Set collaborator request."""

    user_id: str  # From authenticated user (must be the author)
    project_id: str
    target_user_id: str
    action: CollaboratorAction


class SetCollaboratorResponse(BaseModel):
    """Collaborators after the change."""

    collaborators: list[PublicProfile]


class SetCollaboratorUseCase:
    """Use case for adding or removing a project collaborator."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize set collaborator use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: SetCollaboratorRequest) -> SetCollaboratorResponse:
        """Execute set collaborator flow.

        Raises:
            NotFoundError: If the project or target user does not exist
            NotAuthorizedError: If the user is not the author
            SelfReferenceError: If the author adds themself
        """
        collaborators = await self.project_service.set_collaborator(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
            UserId(parse_uuid(request.target_user_id, "User")),
            request.action,
        )
        profiles = await self.user_service.get_public_profiles(collaborators)
        return SetCollaboratorResponse(
            collaborators=[profiles[c] for c in collaborators]
        )
