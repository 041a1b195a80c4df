"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from comet.domain.error import (
    AreaHiddenError,
    ConflictError,
    DomainError,
    HumanVerificationError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

# Checked in order; the first matching class wins
ERROR_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (AreaHiddenError, status.HTTP_403_FORBIDDEN),
    (HumanVerificationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_code_for(error: DomainError) -> int:
    """HTTP status for a domain error (400 for anything unmapped)."""
    return next(
        (code for error_type, code in ERROR_STATUS_CODES if isinstance(error, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = status_code_for(exc)
    logfire.warn(
        "Request failed with domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
