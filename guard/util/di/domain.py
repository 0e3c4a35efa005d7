"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from guard.config import AuthSettings, RecoverySettings
from guard.domain.repository import ReportRepository, UserRepository
from guard.domain.service import (
    ChatClient,
    ChatService,
    CodeSecretPolicy,
    EmailSender,
    JWTService,
    PasswordService,
    RecoveryService,
    RecoverySecretPolicy,
    ReportService,
    TokenSecretPolicy,
    UserService,
)
from guard.domain.value import RecoveryScheme
from guard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    Stateless services that only depend on settings or APP-scoped clients
    are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(rounds=auth_settings.bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_chat_service(self, chat_client: ChatClient) -> ChatService:
        """Provide chat identity domain service."""
        return ChatService(chat_client=chat_client)

    @provide(scope=Scope.APP)
    def get_recovery_policies(
        self, recovery_settings: RecoverySettings
    ) -> dict[RecoveryScheme, RecoverySecretPolicy]:
        """Provide the secret policy for each recovery scheme.

        Raises:
            ConfigurationError: If the token size is below the minimum
        """
        return {
            RecoveryScheme.TOKEN: TokenSecretPolicy(
                ttl=timedelta(minutes=recovery_settings.token_expiry_minutes),
                token_bytes=recovery_settings.token_bytes,
                reset_link_url=recovery_settings.reset_link_url,
                app_scheme=recovery_settings.app_scheme,
            ),
            RecoveryScheme.CODE: CodeSecretPolicy(
                ttl=timedelta(minutes=recovery_settings.code_expiry_minutes),
            ),
        }

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        chat_service: ChatService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            password_service=password_service,
            chat_service=chat_service,
        )

    @provide
    def get_recovery_service(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        email_sender: EmailSender,
        policies: dict[RecoveryScheme, RecoverySecretPolicy],
    ) -> RecoveryService:
        """Provide password recovery domain service."""
        return RecoveryService(
            user_repository=user_repository,
            password_service=password_service,
            email_sender=email_sender,
            policies=policies,
        )

    @provide
    def get_report_service(self, report_repository: ReportRepository) -> ReportService:
        """Provide report domain service."""
        return ReportService(report_repository=report_repository)
