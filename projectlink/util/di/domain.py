"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from projectlink.config import ActivitySettings, AuthSettings
from projectlink.domain.repository import (
    NotificationReadRepository,
    ProjectRepository,
    UserRepository,
)
from projectlink.domain.service import (
    ActivityService,
    AdminService,
    CommentService,
    JWTService,
    ProjectService,
    UserService,
    ViewCache,
)
from projectlink.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The view cache is the exception: it is process state and lives at APP scope.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_view_cache(self, activity_settings: ActivitySettings) -> ViewCache:
        """Provide the process-wide view deduplication cache."""
        return ViewCache(
            cooldown=timedelta(hours=activity_settings.view_cooldown_hours),
            max_entries=activity_settings.view_cache_max_entries,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        user_service: UserService,
        view_cache: ViewCache,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            user_service=user_service,
            view_cache=view_cache,
        )

    @provide
    def get_comment_service(
        self,
        project_repository: ProjectRepository,
        project_service: ProjectService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            project_repository=project_repository,
            project_service=project_service,
            user_service=user_service,
        )

    @provide
    def get_activity_service(
        self,
        user_service: UserService,
        project_repository: ProjectRepository,
        notification_read_repository: NotificationReadRepository,
        activity_settings: ActivitySettings,
    ) -> ActivityService:
        """Provide activity feed domain service."""
        return ActivityService(
            user_service=user_service,
            project_repository=project_repository,
            notification_read_repository=notification_read_repository,
            activity_settings=activity_settings,
        )

    @provide
    def get_admin_service(
        self,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        notification_read_repository: NotificationReadRepository,
        user_service: UserService,
        view_cache: ViewCache,
    ) -> AdminService:
        """Provide admin domain service."""
        return AdminService(
            user_repository=user_repository,
            project_repository=project_repository,
            notification_read_repository=notification_read_repository,
            user_service=user_service,
            view_cache=view_cache,
        )
