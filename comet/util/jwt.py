"""JWT token utilities for the administrator session."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from comet.config import AuthSettings
from comet.util.error import UtilError

ADMIN_ROLE = "admin"


class TokenPayload(BaseModel):
    """JWT token payload."""

    role: str
    exp: datetime


class JWTError(UtilError):
    """JWT-related error."""

    pass


def create_token(settings: AuthSettings, role: str = ADMIN_ROLE) -> str:
    """Create a signed session token.

    Args:
        settings: Authentication settings
        role: Role claim carried by the token

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "role": role,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
