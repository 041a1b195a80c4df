"""Resolving the caller's identity from the admin session cookie."""

from fastapi import Request

from comet.domain.service import AdminAuthService
from comet.domain.value import Caller


def caller_from_request(request: Request, admin_auth_service: AdminAuthService) -> Caller:
    """Build the caller for a request.

    Requests without a valid session cookie are anonymous visitors.
    """
    token = request.cookies.get(admin_auth_service.auth_settings.cookie_name)
    return admin_auth_service.caller_from_token(token)


def client_ip(request: Request) -> str | None:
    """Best-effort client address, preferring the Cloudflare header."""
    forwarded = request.headers.get("cf-connecting-ip")
    if forwarded:
        return forwarded
    return request.client.host if request.client else None
