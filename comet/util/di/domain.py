"""Domain layer DI providers."""

from dishka import Scope, provide

from comet.config import AuthSettings, ModerationSettings
from comet.domain.repository import (
    AreaRepository,
    CommentRepository,
    ReportRepository,
)
from comet.domain.service import (
    AdminAuthService,
    AreaService,
    CommentService,
    CommentTreeBuilder,
    ModerationService,
    ModerationStateMachine,
    ReportService,
    VisibilityPolicy,
)
from comet.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Stateless rules (visibility, tree assembly, flag transitions) live for the
    whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_visibility_policy(
        self, moderation_settings: ModerationSettings
    ) -> VisibilityPolicy:
        """Provide visibility rules configured from moderation settings."""
        return VisibilityPolicy(
            redact_hidden_comments=moderation_settings.redact_hidden_comments
        )

    @provide(scope=Scope.APP)
    def get_comment_tree_builder(
        self, moderation_settings: ModerationSettings
    ) -> CommentTreeBuilder:
        return CommentTreeBuilder(max_depth=moderation_settings.max_thread_depth)

    @provide(scope=Scope.APP)
    def get_moderation_state_machine(self) -> ModerationStateMachine:
        return ModerationStateMachine()

    @provide(scope=Scope.APP)
    def get_admin_auth_service(self, auth_settings: AuthSettings) -> AdminAuthService:
        """Provide admin session service."""
        return AdminAuthService(auth_settings=auth_settings)

    @provide
    def get_area_service(self, area_repository: AreaRepository) -> AreaService:
        """Provide area domain service."""
        return AreaService(area_repository=area_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        area_repository: AreaRepository,
        visibility_policy: VisibilityPolicy,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            area_repository=area_repository,
            visibility_policy=visibility_policy,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        comment_repository: CommentRepository,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_moderation_service(
        self,
        state_machine: ModerationStateMachine,
        area_service: AreaService,
        comment_service: CommentService,
        report_service: ReportService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            state_machine=state_machine,
            area_service=area_service,
            comment_service=comment_service,
            report_service=report_service,
        )
