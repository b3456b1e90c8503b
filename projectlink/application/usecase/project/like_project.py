"""Like, unlike and bookmark use cases."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.service import ProjectService
from projectlink.domain.value import ProjectId, UserId, parse_uuid


class ProjectActionRequest(BaseModel):
    """A user acting on a project."""

    user_id: str  # From authenticated user
    project_id: str


class LikeCountResponse(BaseModel):
    """Like count after a like or unlike."""

    likes: int


class BookmarkResponse(BaseModel):
    """Bookmark state after a toggle."""

    bookmarked: bool


class LikeProjectUseCase:
    """Use case for liking a project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize like project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: ProjectActionRequest) -> LikeCountResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the project does not exist
            AlreadyLikedError: If the user already liked it
        """
        likes = await self.project_service.like(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
        )
        return LikeCountResponse(likes=likes)


class UnlikeProjectUseCase:
    """Use case for removing a like."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ProjectActionRequest) -> LikeCountResponse:
        likes = await self.project_service.unlike(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
        )
        return LikeCountResponse(likes=likes)


class ToggleBookmarkUseCase:
    """Use case for bookmarking or un-bookmarking a project."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ProjectActionRequest) -> BookmarkResponse:
        bookmarked = await self.project_service.toggle_bookmark(
            UserId(UUID(request.user_id)),
            ProjectId(parse_uuid(request.project_id, "Project")),
        )
        return BookmarkResponse(bookmarked=bookmarked)
