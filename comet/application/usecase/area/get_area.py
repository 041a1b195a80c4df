"""Get comment area use case."""

from pydantic import BaseModel, Field

from comet.domain.model import CommentArea
from comet.domain.service import AreaService, VisibilityPolicy
from comet.domain.value import AreaKey, Caller


class AreaResponse(BaseModel):
    """Comment area as returned to the rendering layer."""

    id: int
    name: str
    area_key: str
    intro: str
    hidden: bool

    @classmethod
    def from_domain(cls, area: CommentArea) -> "AreaResponse":
        return cls(
            id=area.id,
            name=area.name,
            area_key=area.area_key.root,
            intro=area.intro,
            hidden=area.hidden,
        )


class GetAreaRequest(BaseModel):
    """Get area request.

    ``auto_create`` is set by the embed view, which creates the area the
    first time a page embeds it.
    """

    area_key: str
    auto_create: bool = False
    caller: Caller = Field(default_factory=Caller.anonymous)


class GetAreaResponse(BaseModel):
    """Get area response."""

    area: AreaResponse
    is_admin: bool
    # Public Turnstile key for the widget; None when verification is off
    captcha_site_key: str | None = None


class GetAreaUseCase:
    """Use case for opening an area page or embed view."""

    def __init__(
        self,
        area_service: AreaService,
        visibility_policy: VisibilityPolicy,
        captcha_site_key: str | None = None,
    ) -> None:
        """Initialize get area use case.

        Args:
            area_service: Area domain service
            visibility_policy: Visibility rules
            captcha_site_key: Public Turnstile key handed to the embed
        """
        self.area_service = area_service
        self.visibility_policy = visibility_policy
        self.captcha_site_key = captcha_site_key

    async def execute(self, request: GetAreaRequest) -> GetAreaResponse:
        """Execute get area flow.

        Raises:
            NotFoundError: If the area does not exist and is not auto-created
            AreaHiddenError: If the area is hidden and the caller is a visitor
        """
        area_key = AreaKey.parse(request.area_key)

        if request.auto_create:
            area = await self.area_service.get_or_create(area_key)
        else:
            area = await self.area_service.get_by_key(area_key)

        area = self.visibility_policy.check_area_page(area, area_key, request.caller)
        return GetAreaResponse(
            area=AreaResponse.from_domain(area),
            is_admin=request.caller.is_admin,
            captcha_site_key=self.captcha_site_key,
        )
