"""Project use cases."""

from .create_project import CreateProjectRequest, CreateProjectUseCase
from .delete_project import (
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
)
from .get_project import (
    CommentView,
    GetProjectRequest,
    GetProjectUseCase,
    ProjectView,
    build_project_views,
)
from .like_project import (
    BookmarkResponse,
    LikeCountResponse,
    LikeProjectUseCase,
    ProjectActionRequest,
    ToggleBookmarkUseCase,
    UnlikeProjectUseCase,
)
from .list_projects import ListProjectsRequest, ListProjectsResponse, ListProjectsUseCase
from .record_view import RecordViewRequest, RecordViewResponse, RecordViewUseCase
from .set_collaborator import (
    SetCollaboratorRequest,
    SetCollaboratorResponse,
    SetCollaboratorUseCase,
)
from .update_project import (
    SetProjectStatusRequest,
    SetProjectStatusUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)

__all__ = [
    "BookmarkResponse",
    "CommentView",
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectResponse",
    "DeleteProjectUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "LikeCountResponse",
    "LikeProjectUseCase",
    "ListProjectsRequest",
    "ListProjectsResponse",
    "ListProjectsUseCase",
    "ProjectActionRequest",
    "ProjectView",
    "RecordViewRequest",
    "RecordViewResponse",
    "RecordViewUseCase",
    "SetCollaboratorRequest",
    "SetCollaboratorResponse",
    "SetCollaboratorUseCase",
    "SetProjectStatusRequest",
    "SetProjectStatusUseCase",
    "ToggleBookmarkUseCase",
    "UnlikeProjectUseCase",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
    "build_project_views",
]
