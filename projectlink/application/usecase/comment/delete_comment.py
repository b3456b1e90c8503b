"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.service import CommentService
from projectlink.domain.value import CommentId, ProjectId, UserId, parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    user_id: str
    project_id: str
    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str = "Comment deleted successfully"


class DeleteCommentUseCase:
    """Use case for deleting a comment.

    Allowed for the comment's author and the project's author.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        await self.comment_service.delete_comment(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
            CommentId(parse_uuid(request.comment_id, "Comment")),
        )
        return DeleteCommentResponse()
