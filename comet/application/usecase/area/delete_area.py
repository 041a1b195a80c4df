"""Delete comment area use case."""

from pydantic import BaseModel, Field

from comet.domain.service import AreaService, require_admin
from comet.domain.value import AreaKey, Caller


class DeleteAreaRequest(BaseModel):
    """Delete area request."""

    area_key: str
    caller: Caller = Field(default_factory=Caller.anonymous)


class DeleteAreaResponse(BaseModel):
    """Delete area response."""

    area_key: str
    deleted: bool


class DeleteAreaUseCase:
    """Use case for deleting an area with all of its comments and reports."""

    def __init__(self, area_service: AreaService) -> None:
        self.area_service = area_service

    async def execute(self, request: DeleteAreaRequest) -> DeleteAreaResponse:
        """Execute delete area flow.

        Raises:
            UnauthorizedError: If the caller is not the administrator
            NotFoundError: If the area does not exist
        """
        require_admin(request.caller, "delete comment areas")

        await self.area_service.delete(AreaKey.parse(request.area_key))
        return DeleteAreaResponse(area_key=request.area_key, deleted=True)
