"""User use cases."""

from .follow_user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    UnfollowUserUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UnfollowUserUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserProfileResponse",
]
