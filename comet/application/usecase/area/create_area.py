"""Create comment area use case."""

from pydantic import BaseModel, Field

from comet.domain.service import AreaService, require_admin
from comet.domain.value import AreaKey, Caller

from .get_area import AreaResponse


class CreateAreaRequest(BaseModel):
    """Create area request."""

    area_key: str
    name: str
    intro: str = ""
    caller: Caller = Field(default_factory=Caller.anonymous)


class CreateAreaUseCase:
    """Use case for the admin creating a comment area up front."""

    def __init__(self, area_service: AreaService) -> None:
        """Initialize create area use case.

        Args:
            area_service: Area domain service
        """
        self.area_service = area_service

    async def execute(self, request: CreateAreaRequest) -> AreaResponse:
        """Execute create area flow.

        Args:
            request: Create area request

        Returns:
            The created area

        Raises:
            UnauthorizedError: If the caller is not the administrator
            ValidationError: If the name or key is empty
            ConflictError: If the key is already taken
        """
        require_admin(request.caller, "create comment areas")

        area = await self.area_service.create(
            area_key=AreaKey.parse(request.area_key),
            name=request.name,
            intro=request.intro,
        )
        return AreaResponse.from_domain(area)
