"""Toggle area visibility use case."""

from pydantic import BaseModel, Field

from comet.domain.service import ModerationService
from comet.domain.value import AreaKey, Caller


class ToggleAreaHiddenRequest(BaseModel):
    """Toggle area hidden request."""

    area_key: str
    caller: Caller = Field(default_factory=Caller.anonymous)


class ToggleAreaHiddenResponse(BaseModel):
    """Toggle area hidden response."""

    area_key: str
    hidden: bool


class ToggleAreaHiddenUseCase:
    """Use case for hiding or unhiding a whole area."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(
        self, request: ToggleAreaHiddenRequest
    ) -> ToggleAreaHiddenResponse:
        """Execute toggle flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the area does not exist
        """
        hidden = await self.moderation_service.toggle_area_hidden(
            request.caller, AreaKey.parse(request.area_key)
        )
        return ToggleAreaHiddenResponse(area_key=request.area_key, hidden=hidden)
