"""Project routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import Field

from projectlink.application.usecase.project import (
    BookmarkResponse,
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    LikeCountResponse,
    LikeProjectUseCase,
    ListProjectsRequest,
    ListProjectsUseCase,
    ProjectActionRequest,
    ProjectView,
    RecordViewRequest,
    RecordViewResponse,
    RecordViewUseCase,
    SetCollaboratorRequest,
    SetCollaboratorResponse,
    SetCollaboratorUseCase,
    SetProjectStatusRequest,
    SetProjectStatusUseCase,
    ToggleBookmarkUseCase,
    UnlikeProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)
from projectlink.domain.service import JWTService
from projectlink.domain.value import CollaboratorAction, ProjectStatus
from projectlink.interface.api.auth import bearer_scheme, require_user_id, viewer_key
from projectlink.interface.api.schema import APIRequestModel

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


class CreateProjectAPIRequest(APIRequestModel):
    """API request for creating a project."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    long_description: str | None = Field(default=None, max_length=20000)
    tags: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    images: list[str] = Field(default_factory=list)
    progress: int | None = Field(default=None, ge=0, le=100)


class UpdateProjectAPIRequest(APIRequestModel):
    """API request for updating a project. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=2000)
    long_description: str | None = Field(default=None, max_length=20000)
    tags: list[str] | None = None
    github_url: str | None = None
    demo_url: str | None = None
    images: list[str] | None = None
    progress: int | None = Field(default=None, ge=0, le=100)


class SetStatusAPIRequest(APIRequestModel):
    """API request for setting a project's status."""

    status: ProjectStatus


class SetCollaboratorAPIRequest(APIRequestModel):
    """API request for adding or removing a collaborator."""

    user_id: str
    action: CollaboratorAction


@router.get("", response_model=list[ProjectView])
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    search: str | None = None,
    tags: str | None = Query(default=None, description="Comma-separated tags"),
    author: str | None = None,
) -> list[ProjectView]:
    """List projects, newest first.

    Args:
        list_projects_use_case: List projects use case from DI
        search: Case-insensitive match on title and descriptions
        tags: Comma-separated tags; a project matches if it has any of them
        author: Only projects by this user ID

    Returns:
        Matching projects
    """
    tag_list = [t for t in tags.split(",") if t.strip()] if tags else None
    result = await list_projects_use_case.execute(
        ListProjectsRequest(search=search, tags=tag_list, author_id=author)
    )
    return result.projects


@router.post("", response_model=ProjectView, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ProjectView:
    """Create a new project owned by the authenticated user.

    Example:
        POST /projects
        Authorization: Bearer ...

        Request:
        {
            "title": "Campus Map",
            "description": "Indoor navigation for the library",
            "tags": ["Maps", "mobile"],
            "githubUrl": "https://github.com/example/campus-map",
            "progress": 40
        }
    """
    user_id = require_user_id(credentials, jwt_service)
    return await create_project_use_case.execute(
        CreateProjectRequest(author_id=user_id, **request.model_dump())
    )


@router.get("/{project_id}", response_model=ProjectView)
async def get_project(
    project_id: str,
    get_project_use_case: FromDishka[GetProjectUseCase],
) -> ProjectView:
    """Get a single project."""
    return await get_project_use_case.execute(GetProjectRequest(project_id=project_id))


@router.put("/{project_id}", response_model=ProjectView)
async def update_project(
    project_id: str,
    request: UpdateProjectAPIRequest,
    update_project_use_case: FromDishka[UpdateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ProjectView:
    """Update a project (author only).

    Changing ``progress`` re-derives the status: 100 means completed.
    """
    user_id = require_user_id(credentials, jwt_service)
    return await update_project_use_case.execute(
        UpdateProjectRequest(
            user_id=user_id,
            project_id=project_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    project_id: str,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteProjectResponse:
    """Delete a project with its comments and likes (author only)."""
    user_id = require_user_id(credentials, jwt_service)
    return await delete_project_use_case.execute(
        DeleteProjectRequest(user_id=user_id, project_id=project_id)
    )


@router.patch("/{project_id}/status", response_model=ProjectView)
async def set_project_status(
    project_id: str,
    request: SetStatusAPIRequest,
    set_status_use_case: FromDishka[SetProjectStatusUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ProjectView:
    """Set a project's status explicitly (author only)."""
    user_id = require_user_id(credentials, jwt_service)
    return await set_status_use_case.execute(
        SetProjectStatusRequest(
            user_id=user_id, project_id=project_id, status=request.status
        )
    )


@router.post("/{project_id}/collaborators", response_model=SetCollaboratorResponse)
async def set_collaborator(
    project_id: str,
    request: SetCollaboratorAPIRequest,
    set_collaborator_use_case: FromDishka[SetCollaboratorUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SetCollaboratorResponse:
    """Add or remove a collaborator (author only).

    Example:
        POST /projects/{id}/collaborators
        {"userId": "...", "action": "add"}
    """
    user_id = require_user_id(credentials, jwt_service)
    return await set_collaborator_use_case.execute(
        SetCollaboratorRequest(
            user_id=user_id,
            project_id=project_id,
            target_user_id=request.user_id,
            action=request.action,
        )
    )


@router.post("/{project_id}/like", response_model=LikeCountResponse)
async def like_project(
    project_id: str,
    like_project_use_case: FromDishka[LikeProjectUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> LikeCountResponse:
    """Like a project. Liking twice is rejected."""
    user_id = require_user_id(credentials, jwt_service)
    return await like_project_use_case.execute(
        ProjectActionRequest(user_id=user_id, project_id=project_id)
    )


@router.post("/{project_id}/unlike", response_model=LikeCountResponse)
async def unlike_project(
    project_id: str,
    unlike_project_use_case: FromDishka[UnlikeProjectUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> LikeCountResponse:
    """Remove the authenticated user's like."""
    user_id = require_user_id(credentials, jwt_service)
    return await unlike_project_use_case.execute(
        ProjectActionRequest(user_id=user_id, project_id=project_id)
    )


@router.post("/{project_id}/bookmark", response_model=BookmarkResponse)
async def toggle_bookmark(
    project_id: str,
    toggle_bookmark_use_case: FromDishka[ToggleBookmarkUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> BookmarkResponse:
    """Toggle the authenticated user's bookmark."""
    user_id = require_user_id(credentials, jwt_service)
    return await toggle_bookmark_use_case.execute(
        ProjectActionRequest(user_id=user_id, project_id=project_id)
    )


@router.post("/{project_id}/view", response_model=RecordViewResponse)
async def record_view(
    project_id: str,
    http_request: Request,
    record_view_use_case: FromDishka[RecordViewUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RecordViewResponse:
    """Count a view.

    Authentication is optional; anonymous viewers are keyed by address.
    The same viewer is counted at most once per cooldown window.
    """
    return await record_view_use_case.execute(
        RecordViewRequest(
            project_id=project_id,
            viewer_key=viewer_key(http_request, credentials, jwt_service),
        )
    )
