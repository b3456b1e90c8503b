"""Notification use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from projectlink.domain.model import Notification
from projectlink.domain.service import ActivityService
from projectlink.domain.value import UserId


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # From authenticated user
    limit: int | None = Field(default=None, ge=1, le=100)


class ListNotificationsResponse(BaseModel):
    """Newest notifications and total unread count."""

    notifications: list[Notification]
    unread_count: int


class MarkNotificationsReadRequest(BaseModel):
    """Mark notifications read request. ``ids`` of None marks everything."""

    user_id: str
    ids: list[str] | None = None


class UnreadCountResponse(BaseModel):
    """Unread count after marking."""

    unread: int


class ListNotificationsUseCase:
    """Use case for listing the requesting user's notifications."""

    def __init__(self, activity_service: ActivityService) -> None:
        """Initialize list notifications use case.

        Args:
            activity_service: Activity domain service
        """
        self.activity_service = activity_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        notifications, unread = await self.activity_service.list_notifications(
            UserId(UUID(request.user_id)), request.limit
        )
        return ListNotificationsResponse(
            notifications=notifications, unread_count=unread
        )


class MarkNotificationsReadUseCase:
    """Use case for marking some or all notifications read."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: MarkNotificationsReadRequest) -> UnreadCountResponse:
        user_id = UserId(UUID(request.user_id))
        if request.ids is None:
            unread = await self.activity_service.mark_all_read(user_id)
        else:
            unread = await self.activity_service.mark_read(user_id, request.ids)
        return UnreadCountResponse(unread=unread)
