"""Follow and unfollow use cases."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.domain.service import UserService
from projectlink.domain.value import UserId, parse_uuid


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    user_id: str  # From authenticated user
    target_id: str


class FollowUserResponse(BaseModel):
    """Follow counts after the change."""

    followers: int  # Target's follower count
    following: int  # Requesting user's following count
    message: str


class FollowUserUseCase:
    """Use case for following another user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize follow user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            SelfReferenceError: If the user tries to follow themself
            NotFoundError: If either user does not exist
            AlreadyFollowingError: If already following
        """
        counts = await self.user_service.follow(
            UserId(UUID(request.user_id)),
            UserId(parse_uuid(request.target_id, "User")),
        )
        return FollowUserResponse(
            followers=counts.followers,
            following=counts.following,
            message="Followed successfully",
        )


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize unfollow user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute unfollow flow."""
        counts = await self.user_service.unfollow(
            UserId(UUID(request.user_id)),
            UserId(parse_uuid(request.target_id, "User")),
        )
        return FollowUserResponse(
            followers=counts.followers,
            following=counts.following,
            message="Unfollowed successfully",
        )
