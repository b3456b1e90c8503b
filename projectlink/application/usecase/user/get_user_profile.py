"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.model import PublicProfile, User
from projectlink.domain.service import UserService
from projectlink.domain.value import UserId, parse_uuid


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # Profile to fetch
    viewer_id: str  # From authenticated user


class UserProfileResponse(BaseModel):
    """User profile with resolved follow lists.

    ``email`` and ``is_admin`` are only filled in for the user themself.
    """

    id: str
    name: str
    email: str | None
    institution: str
    avatar_url: str | None
    bio: str
    skills: list[str]
    followers: list[PublicProfile]
    following: list[PublicProfile]
    follower_count: int
    following_count: int
    is_admin: bool | None
    created_at: datetime


async def build_profile(
    user: User, user_service: UserService, is_self: bool
) -> UserProfileResponse:
    """Build a profile response, resolving follow edges in one batch."""
    profiles = await user_service.get_public_profiles(
        [*user.follower_ids, *user.following_ids]
    )
    return UserProfileResponse(
        id=str(user.id),
        name=user.name,
        email=user.email if is_self else None,
        institution=user.institution,
        avatar_url=user.avatar_url,
        bio=user.bio,
        skills=user.skills,
        followers=[profiles[uid] for uid in user.follower_ids],
        following=[profiles[uid] for uid in user.following_ids],
        follower_count=len(user.followers),
        following_count=len(user.following),
        is_admin=user.is_admin if is_self else None,
        created_at=user.created_at,
    )


class GetUserProfileUseCase:
    """Use case for getting a user's profile by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "User"))
        user = await self.user_service.get_by_id(user_id)
        return await build_profile(
            user, self.user_service, is_self=user_id == UUID(request.viewer_id)
        )
