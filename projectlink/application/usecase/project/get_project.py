"""Get project use case."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from projectlink.domain.model import Comment, Project, PublicProfile
from projectlink.domain.service import ProjectService, UserService
from projectlink.domain.value import ProjectId, ProjectStatus, UserId, parse_uuid


class CommentView(BaseModel):
    """Comment with its author's public profile."""

    id: str
    user: PublicProfile
    text: str
    created_at: datetime

    @classmethod
    def build(cls, comment: Comment, user: PublicProfile) -> "CommentView":
        return cls(
            id=str(comment.id),
            user=user,
            text=comment.text,
            created_at=comment.created_at,
        )


class ProjectView(BaseModel):
    """Project as returned by the API, with embedded profiles resolved."""

    id: str
    title: str
    description: str
    long_description: str | None
    tags: list[str]
    github_url: str | None
    demo_url: str | None
    images: list[str]
    author: PublicProfile
    progress: int
    status: ProjectStatus
    views: int
    collaborators: list[PublicProfile]
    bookmarks: list[str]
    likes: list[str]
    like_count: int
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime


async def build_project_views(
    projects: Sequence[Project], user_service: UserService
) -> list[ProjectView]:
    """Resolve every referenced user in one batch and build views."""
    user_ids: list[UserId] = []
    for project in projects:
        user_ids.append(project.author_id)
        user_ids.extend(project.collaborators)
        user_ids.extend(c.user_id for c in project.comments)
    profiles = await user_service.get_public_profiles(user_ids)

    return [
        ProjectView(
            id=str(project.id),
            title=project.title,
            description=project.description,
            long_description=project.long_description,
            tags=project.tags,
            github_url=project.github_url,
            demo_url=project.demo_url,
            images=project.images,
            author=profiles[project.author_id],
            progress=project.progress,
            status=project.status,
            views=project.views,
            collaborators=[profiles[c] for c in project.collaborators],
            bookmarks=[str(b) for b in project.bookmarks],
            likes=[str(uid) for uid in project.like_ids],
            like_count=len(project.likes),
            comments=[CommentView.build(c, profiles[c.user_id]) for c in project.comments],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
        for project in projects
    ]


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: str


class GetProjectUseCase:
    """Use case for fetching a single project."""

    def __init__(self, project_service: ProjectService, user_service: UserService) -> None:
        """Initialize get project use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: GetProjectRequest) -> ProjectView:
        """Execute get project flow.

        Raises:
            NotFoundError: If the project does not exist
        """
        project_id = ProjectId(parse_uuid(request.project_id, "Project"))
        project = await self.project_service.get_by_id(project_id)
        views = await build_project_views([project], self.user_service)
        return views[0]
