"""Comment area routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel

from comet.application.usecase.area import (
    AreaResponse,
    CreateAreaRequest,
    CreateAreaUseCase,
    GetAreaRequest,
    GetAreaResponse,
    GetAreaUseCase,
)
from comet.domain.service import AdminAuthService

from .session import caller_from_request

router = APIRouter(tags=["areas"], route_class=DishkaRoute)


class CreateAreaAPIRequest(BaseModel):
    """API request for creating an area."""

    area_key: str
    name: str
    intro: str = ""


@router.get("/area/{area_key}", response_model=GetAreaResponse)
async def get_area(
    area_key: str,
    request: Request,
    get_area_use_case: FromDishka[GetAreaUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> GetAreaResponse:
    """Open the page of an existing area.

    Unknown keys answer 404; hidden areas answer 403 unless the caller is
    the administrator.
    """
    return await get_area_use_case.execute(
        GetAreaRequest(
            area_key=area_key,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.get("/embed/area/{area_key}", response_model=GetAreaResponse)
async def embed_area(
    area_key: str,
    request: Request,
    get_area_use_case: FromDishka[GetAreaUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> GetAreaResponse:
    """Open the embeddable view of an area, creating the area on first use."""
    return await get_area_use_case.execute(
        GetAreaRequest(
            area_key=area_key,
            auto_create=True,
            caller=caller_from_request(request, admin_auth_service),
        )
    )


@router.post(
    "/create", response_model=AreaResponse, status_code=status.HTTP_201_CREATED
)
async def create_area(
    body: CreateAreaAPIRequest,
    request: Request,
    create_area_use_case: FromDishka[CreateAreaUseCase],
    admin_auth_service: FromDishka[AdminAuthService],
) -> AreaResponse:
    """Create an area with a display name and intro (admin only)."""
    return await create_area_use_case.execute(
        CreateAreaRequest(
            area_key=body.area_key,
            name=body.name,
            intro=body.intro,
            caller=caller_from_request(request, admin_auth_service),
        )
    )
