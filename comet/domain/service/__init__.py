"""Domain services."""

from .admin_auth_service import AdminAuthService
from .area_service import AreaService
from .base import Service
from .captcha import CaptchaVerifier
from .comment_service import CommentService
from .comment_tree import CommentNode, CommentTree, CommentTreeBuilder
from .moderation import (
    ModerationAction,
    ModerationFlag,
    ModerationService,
    ModerationStateMachine,
    require_admin,
)
from .report_service import ReportService
from .visibility import VisibilityPolicy

__all__ = [
    "AdminAuthService",
    "AreaService",
    "CaptchaVerifier",
    "CommentNode",
    "CommentService",
    "CommentTree",
    "CommentTreeBuilder",
    "ModerationAction",
    "ModerationFlag",
    "ModerationService",
    "ModerationStateMachine",
    "ReportService",
    "Service",
    "VisibilityPolicy",
    "require_admin",
]
