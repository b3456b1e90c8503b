"""Admin listing use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from projectlink.application.usecase.base import BaseUseCase
from projectlink.application.usecase.project.get_project import (
    ProjectView,
    build_project_views,
)
from projectlink.domain.model import User
from projectlink.domain.service import AdminService, UserService
from projectlink.domain.value import UserId

from .get_platform_stats import AdminRequest


class AdminUserView(BaseModel):
    """User as shown in the admin console."""

    id: str
    name: str
    email: str
    institution: str
    avatar_url: str | None
    is_admin: bool
    banned: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "AdminUserView":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            institution=user.institution,
            avatar_url=user.avatar_url,
            is_admin=user.is_admin,
            banned=user.banned,
            created_at=user.created_at,
        )


class ListUsersUseCase(BaseUseCase):
    """Use case for listing every user."""

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: AdminRequest) -> list[AdminUserView]:
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        users = await self.admin_service.list_users()
        return [AdminUserView.from_user(user) for user in users]


class ListAllProjectsUseCase(BaseUseCase):
    """Use case for listing every project."""

    def __init__(self, admin_service: AdminService, user_service: UserService) -> None:
        self.admin_service = admin_service
        self.user_service = user_service

    async def execute(self, request: AdminRequest) -> list[ProjectView]:
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        projects = await self.admin_service.list_projects()
        return await build_project_views(projects, self.user_service)
