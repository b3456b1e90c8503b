"""Admin stats use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.application.usecase.base import BaseUseCase
from projectlink.domain.service import AdminService
from projectlink.domain.value import UserId


class AdminRequest(BaseModel):
    """Request carrying only the acting admin."""

    admin_id: str  # From authenticated user


class PlatformStatsResponse(BaseModel):
    """Platform-wide totals."""

    total_users: int
    total_projects: int
    total_likes: int
    total_comments: int
    active_users: int


class GetPlatformStatsUseCase(BaseUseCase):
    """Use case for the admin dashboard totals."""

    def __init__(self, admin_service: AdminService) -> None:
        """Initialize get platform stats use case.

        Args:
            admin_service: Admin domain service
        """
        self.admin_service = admin_service

    async def execute(self, request: AdminRequest) -> PlatformStatsResponse:
        """Execute get stats flow.

        Raises:
            NotAuthorizedError: If the requester is not an admin
        """
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        stats = await self.admin_service.stats()
        return PlatformStatsResponse(
            total_users=stats.total_users,
            total_projects=stats.total_projects,
            total_likes=stats.total_likes,
            total_comments=stats.total_comments,
            active_users=stats.active_users,
        )
