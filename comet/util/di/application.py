"""Application layer DI providers."""

from dishka import Scope, provide

from comet.application.usecase.admin import AdminLoginUseCase, GetOverviewUseCase
from comet.application.usecase.area import (
    CreateAreaUseCase,
    DeleteAreaUseCase,
    GetAreaUseCase,
    ToggleAreaHiddenUseCase,
)
from comet.application.usecase.comment import (
    GetCommentsUseCase,
    GetThreadUseCase,
    LikeCommentUseCase,
    PostCommentUseCase,
    ToggleCommentHiddenUseCase,
    ToggleCommentPinUseCase,
)
from comet.application.usecase.report import (
    CreateReportUseCase,
    ListReportsUseCase,
    ResolveReportUseCase,
)
from comet.config import CaptchaSettings, ModerationSettings
from comet.domain.service import (
    AdminAuthService,
    AreaService,
    CaptchaVerifier,
    CommentService,
    CommentTreeBuilder,
    ModerationService,
    ReportService,
    VisibilityPolicy,
)
from comet.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_login_use_case(
        self, admin_auth_service: AdminAuthService
    ) -> AdminLoginUseCase:
        """Provide admin login use case."""
        return AdminLoginUseCase(admin_auth_service=admin_auth_service)

    @provide(scope=Scope.REQUEST)
    def get_overview_use_case(
        self, area_service: AreaService, report_service: ReportService
    ) -> GetOverviewUseCase:
        """Provide admin overview use case."""
        return GetOverviewUseCase(
            area_service=area_service, report_service=report_service
        )

    # Area use cases
    @provide(scope=Scope.REQUEST)
    def get_create_area_use_case(self, area_service: AreaService) -> CreateAreaUseCase:
        """Provide create area use case."""
        return CreateAreaUseCase(area_service=area_service)

    @provide(scope=Scope.REQUEST)
    def get_get_area_use_case(
        self,
        area_service: AreaService,
        visibility_policy: VisibilityPolicy,
        captcha_settings: CaptchaSettings,
    ) -> GetAreaUseCase:
        """Provide get area use case."""
        return GetAreaUseCase(
            area_service=area_service,
            visibility_policy=visibility_policy,
            captcha_site_key=(
                captcha_settings.site_key if captcha_settings.enabled else None
            ),
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_area_use_case(self, area_service: AreaService) -> DeleteAreaUseCase:
        """Provide delete area use case."""
        return DeleteAreaUseCase(area_service=area_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_area_hidden_use_case(
        self, moderation_service: ModerationService
    ) -> ToggleAreaHiddenUseCase:
        """Provide toggle area hidden use case."""
        return ToggleAreaHiddenUseCase(moderation_service=moderation_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        comment_service: CommentService,
        tree_builder: CommentTreeBuilder,
        moderation_settings: ModerationSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service,
            tree_builder=tree_builder,
            expose_orphans_to_admin=moderation_settings.expose_orphans_to_admin,
        )

    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self,
        area_service: AreaService,
        comment_service: CommentService,
        visibility_policy: VisibilityPolicy,
        captcha_verifier: CaptchaVerifier,
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            area_service=area_service,
            comment_service=comment_service,
            visibility_policy=visibility_policy,
            captcha_verifier=captcha_verifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_hidden_use_case(
        self, moderation_service: ModerationService
    ) -> ToggleCommentHiddenUseCase:
        """Provide toggle comment hidden use case."""
        return ToggleCommentHiddenUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_pin_use_case(
        self, moderation_service: ModerationService
    ) -> ToggleCommentPinUseCase:
        """Provide toggle comment pin use case."""
        return ToggleCommentPinUseCase(moderation_service=moderation_service)

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

    @provide(scope=Scope.REQUEST)
    def get_resolve_report_use_case(
        self, moderation_service: ModerationService
    ) -> ResolveReportUseCase:
        """Provide resolve report use case."""
        return ResolveReportUseCase(moderation_service=moderation_service)
