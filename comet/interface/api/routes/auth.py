"""Administrator session routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from comet.application.usecase.admin import AdminLoginRequest, AdminLoginUseCase
from comet.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in as the administrator."""

    password: str


class LoginAPIResponse(BaseModel):
    """Login outcome. The session token travels only in the cookie."""

    success: bool
    message: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Exchange the admin password for a session cookie.

    A wrong password still answers 200, with ``success`` set to false.
    """
    result = await admin_login_use_case.execute(
        AdminLoginRequest(password=request.password)
    )
    if not result.success or result.token is None:
        logger.info("Admin login rejected")
        return LoginAPIResponse(success=False, message=result.message)

    response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logger.info("Admin session cookie set")
    return LoginAPIResponse(success=True, message=result.message)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Clear the admin session cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")
