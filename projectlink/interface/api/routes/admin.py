"""Admin console routes.

Every route requires a bearer token of a user whose stored ``is_admin``
flag is set.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from projectlink.application.usecase.admin import (
    AdminRequest,
    AdminUserView,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    GetPlatformStatsUseCase,
    ListAllProjectsUseCase,
    ListUsersUseCase,
    PlatformStatsResponse,
    ReconcileFollowsResponse,
    ReconcileFollowsUseCase,
    SetUserBanUseCase,
    SetUserFlagRequest,
    SetUserRoleUseCase,
    UserFlagResponse,
)
from projectlink.application.usecase.project import ProjectView
from projectlink.domain.service import JWTService
from projectlink.interface.api.auth import bearer_scheme, require_user_id
from projectlink.interface.api.schema import APIRequestModel

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class SetRoleAPIRequest(APIRequestModel):
    is_admin: bool


class SetBanAPIRequest(APIRequestModel):
    banned: bool


@router.get("/stats", response_model=PlatformStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetPlatformStatsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PlatformStatsResponse:
    """Platform-wide totals."""
    admin_id = require_user_id(credentials, jwt_service)
    return await get_stats_use_case.execute(AdminRequest(admin_id=admin_id))


@router.get("/users", response_model=list[AdminUserView])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> list[AdminUserView]:
    """Every user, newest first."""
    admin_id = require_user_id(credentials, jwt_service)
    return await list_users_use_case.execute(AdminRequest(admin_id=admin_id))


@router.get("/projects", response_model=list[ProjectView])
async def list_projects(
    list_projects_use_case: FromDishka[ListAllProjectsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> list[ProjectView]:
    """Every project, newest first."""
    admin_id = require_user_id(credentials, jwt_service)
    return await list_projects_use_case.execute(AdminRequest(admin_id=admin_id))


@router.delete("/users/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteUserResponse:
    """Delete a user together with their projects and all their traces.

    Likes, comments, bookmarks, collaborations and follow edges held on
    other records are removed as well.
    """
    admin_id = require_user_id(credentials, jwt_service)
    return await delete_user_use_case.execute(
        DeleteUserRequest(admin_id=admin_id, user_id=user_id)
    )


@router.patch("/users/{user_id}/role", response_model=UserFlagResponse)
async def set_user_role(
    user_id: str,
    request: SetRoleAPIRequest,
    set_role_use_case: FromDishka[SetUserRoleUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserFlagResponse:
    """Grant or revoke admin rights.

    Example:
        PATCH /admin/users/{id}/role
        {"isAdmin": true}
    """
    admin_id = require_user_id(credentials, jwt_service)
    return await set_role_use_case.execute(
        SetUserFlagRequest(admin_id=admin_id, user_id=user_id, value=request.is_admin)
    )


@router.patch("/users/{user_id}/ban", response_model=UserFlagResponse)
async def set_user_ban(
    user_id: str,
    request: SetBanAPIRequest,
    set_ban_use_case: FromDishka[SetUserBanUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserFlagResponse:
    """Ban or unban a user."""
    admin_id = require_user_id(credentials, jwt_service)
    return await set_ban_use_case.execute(
        SetUserFlagRequest(admin_id=admin_id, user_id=user_id, value=request.banned)
    )


@router.post("/reconcile-follows", response_model=ReconcileFollowsResponse)
async def reconcile_follows(
    reconcile_use_case: FromDishka[ReconcileFollowsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ReconcileFollowsResponse:
    """Repair asymmetric or dangling follow edges."""
    admin_id = require_user_id(credentials, jwt_service)
    return await reconcile_use_case.execute(AdminRequest(admin_id=admin_id))
