"""User profile, follow, notification and dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import Field

from projectlink.application.usecase.activity import (
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadUseCase,
    UnreadCountResponse,
)
from projectlink.application.usecase.user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UnfollowUserUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfileResponse,
)
from projectlink.domain.service import JWTService
from projectlink.interface.api.auth import bearer_scheme, require_user_id
from projectlink.interface.api.schema import APIRequestModel

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(APIRequestModel):
    """API request for updating the current user's profile.

    Omitted fields are unchanged. Send ``avatarUrl: null`` to remove the avatar.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    institution: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=1000)
    avatar_url: str | None = None
    skills: list[str] | None = None


class MarkReadAPIRequest(APIRequestModel):
    """API request for marking notifications as read."""

    ids: list[str] = Field(default_factory=list)


# Static paths are registered before /{user_id} so they are not shadowed


@router.get("/notifications", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1, le=100),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListNotificationsResponse:
    """Newest notifications for the current user with the unread count.

    Notifications are derived from likes, comments and follows on the fly;
    only read markers are stored.
    """
    user_id = require_user_id(credentials, jwt_service)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, limit=limit)
    )


@router.post("/notifications/read", response_model=UnreadCountResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UnreadCountResponse:
    """Mark the given notifications as read. Unknown IDs are ignored."""
    user_id = require_user_id(credentials, jwt_service)
    return await mark_read_use_case.execute(
        MarkNotificationsReadRequest(user_id=user_id, ids=request.ids)
    )


@router.post("/notifications/read-all", response_model=UnreadCountResponse)
async def mark_all_notifications_read(
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UnreadCountResponse:
    """Mark every current notification as read."""
    user_id = require_user_id(credentials, jwt_service)
    return await mark_read_use_case.execute(
        MarkNotificationsReadRequest(user_id=user_id, ids=None)
    )


@router.get("/dashboard", response_model=GetDashboardResponse)
async def get_dashboard(
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetDashboardResponse:
    """Activity feed, notifications and statistics for the current user.

    Returns:
        Activities newest first, the latest notifications, the unread
        count and totals over the user's own projects
    """
    user_id = require_user_id(credentials, jwt_service)
    return await get_dashboard_use_case.execute(GetDashboardRequest(user_id=user_id))


@router.put("/me", response_model=UserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserProfileResponse:
    """Update the current user's profile.

    Example:
        PUT /users/me
        {"bio": "Robotics student", "skills": ["python", "ros"]}
    """
    user_id = require_user_id(credentials, jwt_service)
    return await update_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id, **request.model_dump(exclude_unset=True)
        )
    )


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserProfileResponse:
    """Get a user's profile with resolved followers and following.

    Email and admin flag are only included on the caller's own profile.
    """
    viewer_id = require_user_id(credentials, jwt_service)
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id, viewer_id=viewer_id)
    )


@router.post("/{user_id}/follow", response_model=FollowUserResponse)
async def follow_user(
    user_id: str,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> FollowUserResponse:
    """Follow a user.

    Raises:
        SelfReferenceError: Following yourself (400)
        AlreadyFollowingError: Already following (400)
        NotFoundError: Unknown user (404)
    """
    current_user_id = require_user_id(credentials, jwt_service)
    return await follow_user_use_case.execute(
        FollowUserRequest(user_id=current_user_id, target_id=user_id)
    )


@router.post("/{user_id}/unfollow", response_model=FollowUserResponse)
async def unfollow_user(
    user_id: str,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> FollowUserResponse:
    """Unfollow a user. Unfollowing someone you do not follow is a no-op."""
    current_user_id = require_user_id(credentials, jwt_service)
    return await unfollow_user_use_case.execute(
        FollowUserRequest(user_id=current_user_id, target_id=user_id)
    )
