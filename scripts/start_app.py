#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from comet.config import Settings
from comet.util.error import ConfigurationError
from comet.util.logging import setup_logging
from comet.util.observability import configure_logfire

DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_secrets(settings: Settings) -> None:
    """Refuse to start a production deployment with the default secrets.

    Raises:
        ConfigurationError: If the admin password or JWT secret is unset
    """
    if settings.environment != "production":
        return

    if not settings.auth.admin_password or settings.auth.jwt_secret == DEFAULT_SECRET:
        raise ConfigurationError(
            "AUTH__ADMIN_PASSWORD and AUTH__JWT_SECRET must be set in production"
        )


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_secrets(settings)
        logfire.info(
            "Starting FastAPI application",
            base_url=settings.api.base_url,
            captcha=settings.captcha.enabled,
        )

        uvicorn.run(
            "comet.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
