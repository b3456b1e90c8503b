"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from projectlink.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from projectlink.application.usecase.project import CommentView
from projectlink.domain.service import JWTService
from projectlink.interface.api.auth import bearer_scheme, require_user_id
from projectlink.interface.api.schema import APIRequestModel

router = APIRouter(
    prefix="/projects/{project_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


class CreateCommentAPIRequest(APIRequestModel):
    """API request for creating a comment.

    Markup is stripped before storing; length is checked by the service.
    """

    text: str


@router.get("", response_model=list[CommentView])
async def get_comments(
    project_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentView]:
    """List a project's comments in posting order."""
    result = await get_comments_use_case.execute(
        GetCommentsRequest(project_id=project_id)
    )
    return result.comments


@router.post("", response_model=CommentView, status_code=status.HTTP_201_CREATED)
async def create_comment(
    project_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentView:
    """Comment on a project.

    Args:
        project_id: Project to comment on
        request: Comment text
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service from DI
        credentials: Bearer token

    Returns:
        The stored comment with the commenter's public profile

    Raises:
        AuthenticationError: If no valid token is present (401)
        ValidationError: If the text is empty or too long (400)
        NotFoundError: If the project does not exist (404)

    Example:
        POST /projects/{id}/comments
        {"text": "Nice work!"}
    """
    user_id = require_user_id(credentials, jwt_service)
    return await create_comment_use_case.execute(
        CreateCommentRequest(user_id=user_id, project_id=project_id, text=request.text)
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    project_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Delete a comment.

    Allowed for the comment's author and for the project's author.
    """
    user_id = require_user_id(credentials, jwt_service)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            user_id=user_id, project_id=project_id, comment_id=comment_id
        )
    )
