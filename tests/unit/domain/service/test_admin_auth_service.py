"""Unit tests for AdminAuthService."""

from datetime import datetime, timedelta

import jwt

from comet.config import AuthSettings
from comet.domain.service import AdminAuthService


def _settings() -> AuthSettings:
    return AuthSettings(admin_password="s3cret", jwt_secret="test-secret")


class TestLogin:
    """Tests for password login."""

    def test_correct_password_returns_token(self):
        service = AdminAuthService(_settings())

        token = service.login("s3cret")

        assert token is not None
        assert service.caller_from_token(token).is_admin is True

    def test_wrong_password_returns_none(self):
        service = AdminAuthService(_settings())

        assert service.login("guess") is None
        assert service.login("") is None

    def test_unset_password_rejects_every_login(self):
        service = AdminAuthService(AuthSettings(jwt_secret="test-secret"))

        assert service.login("") is None
        assert service.login("CHANGE_ME_IN_PRODUCTION") is None

    def test_default_settings_have_no_admin_password(self):
        assert AuthSettings().admin_password is None


class TestCallerFromToken:
    """Tests for resolving callers from session tokens."""

    def test_missing_token_is_anonymous(self):
        service = AdminAuthService(_settings())

        assert service.caller_from_token(None).is_admin is False

    def test_garbage_token_is_anonymous(self):
        service = AdminAuthService(_settings())

        assert service.caller_from_token("not-a-jwt").is_admin is False

    def test_token_signed_with_other_secret_is_anonymous(self):
        other = AdminAuthService(
            AuthSettings(admin_password="s3cret", jwt_secret="other-secret")
        )
        token = other.login("s3cret")

        assert AdminAuthService(_settings()).caller_from_token(token).is_admin is False

    def test_expired_token_is_anonymous(self):
        settings = _settings()
        token = jwt.encode(
            {"role": "admin", "exp": datetime.now() - timedelta(days=1)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        assert AdminAuthService(settings).caller_from_token(token).is_admin is False
