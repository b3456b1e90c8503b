"""Admin user management use cases."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.application.usecase.base import BaseUseCase
from projectlink.domain.service import AdminService
from projectlink.domain.value import UserId, parse_uuid

from .list_all import AdminUserView


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    admin_id: str
    user_id: str


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    message: str = "User and associated data deleted successfully"


class SetUserFlagRequest(BaseModel):
    """Set admin or banned flag request."""

    admin_id: str
    user_id: str
    value: bool


class UserFlagResponse(BaseModel):
    """Updated user after a flag change."""

    message: str
    user: AdminUserView


class DeleteUserUseCase(BaseUseCase):
    """Use case for deleting a user with all their data."""

    def __init__(self, admin_service: AdminService) -> None:
        """Initialize delete user use case.

        Args:
            admin_service: Admin domain service
        """
        self.admin_service = admin_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotAuthorizedError: If the requester is not an admin
            NotFoundError: If the user does not exist
        """
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        await self.admin_service.delete_user(UserId(parse_uuid(request.user_id, "User")))
        return DeleteUserResponse()


class SetUserRoleUseCase(BaseUseCase):
    """Use case for granting or revoking admin rights."""

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: SetUserFlagRequest) -> UserFlagResponse:
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        user = await self.admin_service.set_admin(
            UserId(parse_uuid(request.user_id, "User")), request.value
        )
        return UserFlagResponse(
            message="User role updated", user=AdminUserView.from_user(user)
        )


class SetUserBanUseCase(BaseUseCase):
    """Use case for banning or unbanning a user."""

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: SetUserFlagRequest) -> UserFlagResponse:
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        user = await self.admin_service.set_banned(
            UserId(parse_uuid(request.user_id, "User")), request.value
        )
        return UserFlagResponse(
            message="User ban status updated", user=AdminUserView.from_user(user)
        )
