"""Application layer DI providers."""

from dishka import Scope, provide

from guard.application.usecase.article import ListArticlesUseCase
from guard.application.usecase.auth import (
    ChatTokenUseCase,
    LoginUseCase,
    SignupUseCase,
)
from guard.application.usecase.recovery import (
    CompleteResetUseCase,
    RequestResetUseCase,
)
from guard.application.usecase.report import CreateReportUseCase, ListReportsUseCase
from guard.application.usecase.user import (
    ApproveUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SubmitIdentityUseCase,
    UpdateAvatarUseCase,
)
from guard.domain.repository import ArticleRepository
from guard.domain.service import (
    ChatService,
    JWTService,
    RecoveryService,
    ReportService,
    UserService,
)
from guard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(self, user_service: UserService) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        chat_service: ChatService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            chat_service=chat_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_chat_token_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        chat_service: ChatService,
    ) -> ChatTokenUseCase:
        """Provide chat token use case."""
        return ChatTokenUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            chat_service=chat_service,
        )

    # Recovery use cases
    @provide(scope=Scope.REQUEST)
    def get_request_reset_use_case(
        self, recovery_service: RecoveryService
    ) -> RequestResetUseCase:
        """Provide request reset use case."""
        return RequestResetUseCase(recovery_service=recovery_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_reset_use_case(
        self, recovery_service: RecoveryService
    ) -> CompleteResetUseCase:
        """Provide complete reset use case."""
        return CompleteResetUseCase(recovery_service=recovery_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_avatar_use_case(
        self, user_service: UserService
    ) -> UpdateAvatarUseCase:
        """Provide update avatar use case."""
        return UpdateAvatarUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_identity_use_case(
        self, user_service: UserService
    ) -> SubmitIdentityUseCase:
        """Provide submit identity document use case."""
        return SubmitIdentityUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_user_use_case(
        self, user_service: UserService
    ) -> ApproveUserUseCase:
        """Provide approve user use case."""
        return ApproveUserUseCase(user_service=user_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self, report_service: ReportService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, report_service: ReportService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(report_service=report_service)

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_list_articles_use_case(
        self, article_repository: ArticleRepository
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(article_repository=article_repository)
