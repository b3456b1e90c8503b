"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from projectlink.domain.service import UserService
from projectlink.domain.value import UserId

from .get_user_profile import UserProfileResponse, build_profile


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request. Unset fields are left unchanged."""

    user_id: str  # From authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=100)
    institution: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=1000)
    avatar_url: str | None = None
    skills: list[str] | None = None


class UpdateUserProfileUseCase:
    """Use case for updating the current user's profile.

    Name, institution, bio, avatar and skills are editable. Email, admin
    and ban flags cannot be changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        changes = request.model_dump(exclude={"user_id"}, exclude_unset=True)
        # An explicit null only clears the avatar
        changes = {
            k: v for k, v in changes.items() if v is not None or k == "avatar_url"
        }
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)), changes
        )
        return await build_profile(user, self.user_service, is_self=True)
