"""Get dashboard use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from projectlink.domain.model import Activity, DashboardStats, Notification
from projectlink.domain.service import ActivityService
from projectlink.domain.value import UserId


class GetDashboardRequest(BaseModel):
    """Get dashboard request."""

    user_id: str  # From authenticated user


class GetDashboardResponse(BaseModel):
    """Dashboard contents for the requesting user."""

    activities: list[Activity]
    notifications: list[Notification]
    unread_count: int
    stats: DashboardStats


class GetDashboardUseCase:
    """Use case for building the requesting user's dashboard."""

    def __init__(self, activity_service: ActivityService) -> None:
        """Initialize get dashboard use case.

        Args:
            activity_service: Activity domain service
        """
        self.activity_service = activity_service

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        """Execute get dashboard flow.

        Returns:
            Recent activity, latest notifications and totals
        """
        with logfire.span("get_dashboard.execute", user_id=request.user_id):
            dashboard = await self.activity_service.build_dashboard(
                UserId(UUID(request.user_id))
            )
            return GetDashboardResponse(
                activities=dashboard.activities,
                notifications=dashboard.notifications,
                unread_count=dashboard.unread_count,
                stats=dashboard.stats,
            )
