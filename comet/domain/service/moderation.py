"""Moderation flags and their transitions.

Every moderation flag is a boolean changed only by the administrator:

    area.hidden       false <-> true   (toggleHide)
    comment.hidden    false <-> true   (toggleHide)
    comment.pinned    false <-> true   (togglePin)
    report.resolved   false  -> true   (resolve)

Once the caller is authorized no transition is refused; the only other
failure is a missing target.
"""

from enum import Enum

import logfire

from comet.domain.error import NotFoundError, UnauthorizedError
from comet.domain.value import AreaKey, Caller, CommentId, ReportId

from .area_service import AreaService
from .base import Service
from .comment_service import CommentService
from .report_service import ReportService


class ModerationFlag(str, Enum):
    """Boolean attribute under admin control."""

    AREA_HIDDEN = "area.hidden"
    COMMENT_HIDDEN = "comment.hidden"
    COMMENT_PINNED = "comment.pinned"
    REPORT_RESOLVED = "report.resolved"


class ModerationAction(str, Enum):
    """Admin action that moves a flag."""

    TOGGLE_HIDE = "toggleHide"
    TOGGLE_PIN = "togglePin"
    RESOLVE = "resolve"


_ALLOWED_ACTIONS: dict[ModerationFlag, ModerationAction] = {
    ModerationFlag.AREA_HIDDEN: ModerationAction.TOGGLE_HIDE,
    ModerationFlag.COMMENT_HIDDEN: ModerationAction.TOGGLE_HIDE,
    ModerationFlag.COMMENT_PINNED: ModerationAction.TOGGLE_PIN,
    ModerationFlag.REPORT_RESOLVED: ModerationAction.RESOLVE,
}


def require_admin(caller: Caller, action: str) -> None:
    """Reject callers without admin identity.

    Raises:
        UnauthorizedError: If the caller is not the administrator
    """
    if not caller.is_admin:
        logfire.warn("Admin action refused", action=action)
        raise UnauthorizedError(action)


class ModerationStateMachine:
    """Legal flag transitions and who may trigger them."""

    def next_state(
        self, flag: ModerationFlag, action: ModerationAction, current: bool
    ) -> bool:
        """Compute the flag value after an action.

        Raises:
            ValueError: If the action does not apply to the flag
        """
        if _ALLOWED_ACTIONS[flag] is not action:
            raise ValueError(f"{action.value} does not apply to {flag.value}")
        if action is ModerationAction.RESOLVE:
            return True
        return not current

    def transition(
        self,
        caller: Caller,
        flag: ModerationFlag,
        action: ModerationAction,
        current: bool,
    ) -> bool:
        """Authorize the caller, then compute the next flag value.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            ValueError: If the action does not apply to the flag
        """
        require_admin(caller, f"{action.value} {flag.value}")
        return self.next_state(flag, action, current)


class ModerationService(Service):
    """Applies moderation actions through the state machine."""

    def __init__(
        self,
        state_machine: ModerationStateMachine,
        area_service: AreaService,
        comment_service: CommentService,
        report_service: ReportService,
    ) -> None:
        """Initialize moderation service.

        Args:
            state_machine: Transition rules
            area_service: Area domain service
            comment_service: Comment domain service
            report_service: Report domain service
        """
        self.state_machine = state_machine
        self.area_service = area_service
        self.comment_service = comment_service
        self.report_service = report_service

    async def toggle_area_hidden(self, caller: Caller, area_key: AreaKey) -> bool:
        """Flip an area's hidden flag.

        Returns:
            The new hidden value

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the area does not exist
        """
        require_admin(caller, "toggle area visibility")
        with logfire.span("moderation.toggle_area_hidden", area_key=area_key.root):
            area = await self.area_service.get_by_key(area_key)
            if area is None:
                raise NotFoundError("Comment area", area_key.root)
            hidden = self.state_machine.transition(
                caller,
                ModerationFlag.AREA_HIDDEN,
                ModerationAction.TOGGLE_HIDE,
                area.hidden,
            )
            updated = await self.area_service.set_hidden(area_key, hidden)
            return updated.hidden

    async def toggle_comment_hidden(
        self, caller: Caller, comment_id: CommentId
    ) -> bool:
        """Flip a comment's hidden flag.

        Returns:
            The new hidden value

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the comment does not exist
        """
        require_admin(caller, "toggle comment visibility")
        with logfire.span("moderation.toggle_comment_hidden", comment_id=comment_id):
            comment = await self.comment_service.get_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            hidden = self.state_machine.transition(
                caller,
                ModerationFlag.COMMENT_HIDDEN,
                ModerationAction.TOGGLE_HIDE,
                comment.hidden,
            )
            updated = await self.comment_service.set_hidden(comment_id, hidden)
            return updated.hidden

    async def toggle_comment_pinned(
        self, caller: Caller, comment_id: CommentId
    ) -> bool:
        """Flip a comment's pinned flag.

        Pinning does not change list or tree order.

        Returns:
            The new pinned value

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the comment does not exist
        """
        require_admin(caller, "toggle comment pin")
        with logfire.span("moderation.toggle_comment_pinned", comment_id=comment_id):
            comment = await self.comment_service.get_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            pinned = self.state_machine.transition(
                caller,
                ModerationFlag.COMMENT_PINNED,
                ModerationAction.TOGGLE_PIN,
                comment.pinned,
            )
            updated = await self.comment_service.set_pinned(comment_id, pinned)
            return updated.pinned

    async def resolve_report(self, caller: Caller, report_id: ReportId) -> bool:
        """Mark a report resolved; repeating it has no further effect.

        Returns:
            The resolved value (always True)

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the report does not exist
        """
        require_admin(caller, "resolve reports")
        with logfire.span("moderation.resolve_report", report_id=report_id):
            report = await self.report_service.get_by_id(report_id)
            if report is None:
                raise NotFoundError("Report", report_id)
            self.state_machine.transition(
                caller,
                ModerationFlag.REPORT_RESOLVED,
                ModerationAction.RESOLVE,
                report.resolved,
            )
            resolved = await self.report_service.resolve(report_id)
            return resolved.resolved
