"""Get comments use case."""

from pydantic import BaseModel

from projectlink.application.usecase.project.get_project import CommentView
from projectlink.domain.service import CommentService
from projectlink.domain.value import ProjectId, parse_uuid


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    project_id: str


class GetCommentsResponse(BaseModel):
    """Comments in insertion order."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for listing a project's comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow."""
        entries = await self.comment_service.list_comments(
            ProjectId(parse_uuid(request.project_id, "Project"))
        )
        return GetCommentsResponse(
            comments=[CommentView.build(comment, user) for comment, user in entries]
        )
