"""Activity feed and notification use cases."""

from .get_dashboard import GetDashboardRequest, GetDashboardResponse, GetDashboardUseCase
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadUseCase,
    UnreadCountResponse,
)

__all__ = [
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationsReadRequest",
    "MarkNotificationsReadUseCase",
    "UnreadCountResponse",
]
