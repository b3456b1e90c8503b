"""Admin use cases."""

from .get_platform_stats import (
    AdminRequest,
    GetPlatformStatsUseCase,
    PlatformStatsResponse,
)
from .list_all import AdminUserView, ListAllProjectsUseCase, ListUsersUseCase
from .manage_user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    SetUserBanUseCase,
    SetUserFlagRequest,
    SetUserRoleUseCase,
    UserFlagResponse,
)
from .reconcile_follows import ReconcileFollowsResponse, ReconcileFollowsUseCase

__all__ = [
    "AdminRequest",
    "AdminUserView",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetPlatformStatsUseCase",
    "ListAllProjectsUseCase",
    "ListUsersUseCase",
    "PlatformStatsResponse",
    "ReconcileFollowsResponse",
    "ReconcileFollowsUseCase",
    "SetUserBanUseCase",
    "SetUserFlagRequest",
    "SetUserRoleUseCase",
    "UserFlagResponse",
]
