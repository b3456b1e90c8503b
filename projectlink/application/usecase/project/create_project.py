"""Create project use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from projectlink.domain.service import ProjectService, UserService
from projectlink.domain.value import UserId

from .get_project import ProjectView, build_project_views


class CreateProjectRequest(BaseModel):
    """Create project request."""

    author_id: str  # From authenticated user
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    long_description: str | None = Field(default=None, max_length=20000)
    tags: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    images: list[str] = Field(default_factory=list)
    progress: int | None = Field(default=None, ge=0, le=100)


class CreateProjectUseCase:
    """Use case for publishing a new project."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: CreateProjectRequest) -> ProjectView:
        """Execute create project flow.

        Steps:
        1. Create the project owned by the requesting user
        2. Resolve author profile for the response

        Returns:
            Created project
        """
        author_id = UserId(UUID(request.author_id))
        project = await self.project_service.create_project(
            author_id, request.model_dump(exclude={"author_id"})
        )
        views = await build_project_views([project], self.user_service)
        return views[0]
