"""Cloudflare Turnstile verification client.

Comment submissions carry the token produced by the Turnstile widget. The
token is checked against the ``siteverify`` endpoint before the comment is
stored.
"""

import httpx
import logfire

from comet.adapter.error import ProviderError
from comet.domain.service.captcha import CaptchaVerifier


class TurnstileVerifier(CaptchaVerifier):
    """Base class for Turnstile verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealTurnstileVerifier(TurnstileVerifier):
    """Verifies tokens with the Turnstile ``siteverify`` API."""

    def __init__(
        self,
        secret_key: str,
        verify_url: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify",
        timeout: float = 5.0,
    ) -> None:
        """Initialize Turnstile client.

        Args:
            secret_key: Turnstile secret key
            verify_url: siteverify endpoint
            timeout: Request timeout in seconds
        """
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.timeout = timeout

    async def _siteverify(self, token: str, remote_ip: str | None) -> dict:
        data = {"secret": self.secret_key, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.verify_url, data=data)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ProviderError(f"Turnstile verification request failed: {e}") from e

    async def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        """Verify a Turnstile token.

        Transport failures count as a failed check.
        """
        if not token:
            logfire.warn("Turnstile token missing")
            return False

        try:
            result = await self._siteverify(token, remote_ip)
        except ProviderError as e:
            logfire.error("Turnstile verification unavailable", error=str(e))
            return False

        success = bool(result.get("success"))
        if not success:
            logfire.warn(
                "Turnstile verification rejected",
                error_codes=result.get("error-codes", []),
            )
        return success


class DisabledTurnstileVerifier(TurnstileVerifier):
    """Used when no secret key is configured: every submission passes."""

    async def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        return True


class MockTurnstileVerifier(TurnstileVerifier):
    """Mock Turnstile verifier for testing.

    Accepts any non-empty token except ``REJECTED_TOKEN``.
    """

    REJECTED_TOKEN = "rejected"

    def __init__(self) -> None:
        self.calls: list[str | None] = []

    async def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        self.calls.append(token)
        return bool(token) and token != self.REJECTED_TOKEN
