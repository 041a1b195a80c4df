"""Administrator session domain service."""

import secrets

import logfire

from comet.config import AuthSettings
from comet.domain.value import Caller
from comet.util.jwt import ADMIN_ROLE, create_token, verify_token

from .base import Service


class AdminAuthService(Service):
    """Exchanges the admin password for a session token and back for a Caller."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize admin auth service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def login(self, password: str) -> str | None:
        """Check the admin password.

        Args:
            password: Submitted password

        Returns:
            Session token if the password matches, None otherwise (always
            None while no admin password is configured)
        """
        with logfire.span("admin_auth_service.login"):
            admin_password = self.auth_settings.admin_password
            if not admin_password:
                logfire.warn("Admin login attempted but no admin password is configured")
                return None

            if not password or not secrets.compare_digest(
                password.encode("utf-8"),
                admin_password.encode("utf-8"),
            ):
                logfire.warn("Admin login failed")
                return None

            logfire.info("Admin logged in")
            return create_token(self.auth_settings, role=ADMIN_ROLE)

    def caller_from_token(self, token: str | None) -> Caller:
        """Resolve a session token to a caller without raising.

        Missing, expired or invalid tokens yield an anonymous caller.
        """
        if not token:
            return Caller.anonymous()

        try:
            payload = verify_token(token, self.auth_settings)
        except Exception as e:
            logfire.debug(
                "Token verification failed, treating as anonymous", error=str(e)
            )
            return Caller.anonymous()

        return Caller(is_admin=payload.role == ADMIN_ROLE)
