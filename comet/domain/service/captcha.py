"""Human verification port."""

from abc import ABC, abstractmethod


class CaptchaVerifier(ABC):
    """Checks that a comment submission comes from a human.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        """Verify a CAPTCHA response token.

        Args:
            token: Token produced by the client-side widget
            remote_ip: Submitter IP address, if known

        Returns:
            True if the submission passes the check
        """
        pass
