"""CAPTCHA infrastructure providers."""

from dishka import Scope, provide
import logfire

from comet.adapter.turnstile import (
    DisabledTurnstileVerifier,
    RealTurnstileVerifier,
)
from comet.config import CaptchaSettings
from comet.domain.service import CaptchaVerifier
from comet.util.di.base import ProviderBase
from comet.util.observability import instrument_httpx


class CaptchaProvider(ProviderBase):
    """CAPTCHA component base."""

    __mock_component__ = "captcha"


class ProdCaptchaProvider(CaptchaProvider):
    """Production CAPTCHA provider backed by Cloudflare Turnstile."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_captcha_verifier(self, captcha_settings: CaptchaSettings) -> CaptchaVerifier:
        """Provide the Turnstile verifier.

        Without a configured secret key every submission is accepted.
        """
        if not captcha_settings.enabled:
            logfire.warn("Turnstile secret key not set, CAPTCHA check disabled")
            return DisabledTurnstileVerifier()

        instrument_httpx()
        return RealTurnstileVerifier(
            secret_key=captcha_settings.secret_key,
            verify_url=captcha_settings.verify_url,
            timeout=captcha_settings.timeout_seconds,
        )
