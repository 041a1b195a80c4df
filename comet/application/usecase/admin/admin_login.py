"""Admin login use case."""

from pydantic import BaseModel

from comet.domain.service import AdminAuthService


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    password: str


class AdminLoginResponse(BaseModel):
    """Admin login response.

    A wrong password is not an error: ``success`` is False and ``token`` is
    None.
    """

    success: bool
    message: str
    token: str | None = None


class AdminLoginUseCase:
    """Use case for exchanging the admin password for a session token."""

    def __init__(self, admin_auth_service: AdminAuthService) -> None:
        """Initialize admin login use case.

        Args:
            admin_auth_service: Admin session service
        """
        self.admin_auth_service = admin_auth_service

    async def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Execute login flow.

        Args:
            request: Login request with the submitted password

        Returns:
            Login outcome with the session token on success
        """
        token = self.admin_auth_service.login(request.password)
        if token is None:
            return AdminLoginResponse(success=False, message="Invalid password")

        return AdminLoginResponse(success=True, message="Logged in", token=token)
