"""Follow graph reconciliation use case."""

from uuid import UUID

from pydantic import BaseModel

from projectlink.application.usecase.base import BaseUseCase
from projectlink.domain.service import AdminService
from projectlink.domain.value import UserId

from .get_platform_stats import AdminRequest


class ReconcileFollowsResponse(BaseModel):
    """Number of user records rewritten."""

    repaired: int


class ReconcileFollowsUseCase(BaseUseCase):
    """Use case for repairing asymmetric follow edges."""

    def __init__(self, admin_service: AdminService) -> None:
        """Initialize reconcile follows use case.

        Args:
            admin_service: Admin domain service
        """
        self.admin_service = admin_service

    async def execute(self, request: AdminRequest) -> ReconcileFollowsResponse:
        """Execute reconciliation flow.

        Raises:
            NotAuthorizedError: If the requester is not an admin
        """
        await self.admin_service.require_admin(UserId(UUID(request.admin_id)))
        repaired = await self.admin_service.reconcile_follow_graph()
        return ReconcileFollowsResponse(repaired=repaired)
