"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.application.usecase.project.get_project import CommentView
from projectlink.domain.service import CommentService
from projectlink.domain.value import ProjectId, UserId, parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    user_id: str  # From authenticated user
    project_id: str
    text: str


class CreateCommentUseCase:
    """Use case for commenting on a project."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Returns:
            Stored comment with the commenter's profile

        Raises:
            ValidationError: If the text is empty after sanitizing or too long
            NotFoundError: If the project does not exist
        """
        comment, profile = await self.comment_service.add_comment(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
            request.text,
        )
        return CommentView.build(comment, profile)
