"""Application layer DI providers."""

from dishka import Scope, provide

from projectlink.application.usecase.activity import (
    GetDashboardUseCase,
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from projectlink.application.usecase.admin import (
    DeleteUserUseCase,
    GetPlatformStatsUseCase,
    ListAllProjectsUseCase,
    ListUsersUseCase,
    ReconcileFollowsUseCase,
    SetUserBanUseCase,
    SetUserRoleUseCase,
)
from projectlink.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from projectlink.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    LikeProjectUseCase,
    ListProjectsUseCase,
    RecordViewUseCase,
    SetCollaboratorUseCase,
    SetProjectStatusUseCase,
    ToggleBookmarkUseCase,
    UnlikeProjectUseCase,
    UpdateProjectUseCase,
)
from projectlink.application.usecase.user import (
    FollowUserUseCase,
    GetUserProfileUseCase,
    UnfollowUserUseCase,
    UpdateUserProfileUseCase,
)
from projectlink.domain.service import (
    ActivityService,
    AdminService,
    CommentService,
    ProjectService,
    UserService,
)
from projectlink.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Project use cases
    @provide(scope=Scope.REQUEST)
    def get_create_project_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> CreateProjectUseCase:
        """Provide create project use case."""
        return CreateProjectUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_project_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_projects_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_project_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> UpdateProjectUseCase:
        """Provide update project use case."""
        return UpdateProjectUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_project_status_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> SetProjectStatusUseCase:
        """Provide set project status use case."""
        return SetProjectStatusUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_project_use_case(
        self, project_service: ProjectService
    ) -> DeleteProjectUseCase:
        """Provide delete project use case."""
        return DeleteProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_like_project_use_case(
        self, project_service: ProjectService
    ) -> LikeProjectUseCase:
        """Provide like project use case."""
        return LikeProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_project_use_case(
        self, project_service: ProjectService
    ) -> UnlikeProjectUseCase:
        """Provide unlike project use case."""
        return UnlikeProjectUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_bookmark_use_case(
        self, project_service: ProjectService
    ) -> ToggleBookmarkUseCase:
        """Provide toggle bookmark use case."""
        return ToggleBookmarkUseCase(project_service=project_service)

    @provide(scope=Scope.REQUEST)
    def get_set_collaborator_use_case(
        self, project_service: ProjectService, user_service: UserService
    ) -> SetCollaboratorUseCase:
        """Provide set collaborator use case."""
        return SetCollaboratorUseCase(
            project_service=project_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(
        self, project_service: ProjectService
    ) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(project_service=project_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(self, user_service: UserService) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, user_service: UserService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(user_service=user_service)

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_get_dashboard_use_case(
        self, activity_service: ActivityService
    ) -> GetDashboardUseCase:
        """Provide get dashboard use case."""
        return GetDashboardUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, activity_service: ActivityService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, activity_service: ActivityService
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(activity_service=activity_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_platform_stats_use_case(
        self, admin_service: AdminService
    ) -> GetPlatformStatsUseCase:
        """Provide admin stats use case."""
        return GetPlatformStatsUseCase(admin_service=admin_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, admin_service: AdminService) -> ListUsersUseCase:
        """Provide admin user listing use case."""
        return ListUsersUseCase(admin_service=admin_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_projects_use_case(
        self, admin_service: AdminService, user_service: UserService
    ) -> ListAllProjectsUseCase:
        """Provide admin project listing use case."""
        return ListAllProjectsUseCase(
            admin_service=admin_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, admin_service: AdminService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(admin_service=admin_service)

    @provide(scope=Scope.REQUEST)
    def get_set_user_role_use_case(
        self, admin_service: AdminService
    ) -> SetUserRoleUseCase:
        """Provide set user role use case."""
        return SetUserRoleUseCase(admin_service=admin_service)

    @provide(scope=Scope.REQUEST)
    def get_set_user_ban_use_case(self, admin_service: AdminService) -> SetUserBanUseCase:
        """Provide set user ban use case."""
        return SetUserBanUseCase(admin_service=admin_service)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_follows_use_case(
        self, admin_service: AdminService
    ) -> ReconcileFollowsUseCase:
        """Provide follow graph reconciliation use case."""
        return ReconcileFollowsUseCase(admin_service=admin_service)
