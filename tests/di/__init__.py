"""Mock providers for testing."""

from .captcha import MockCaptchaProvider
from .config import FixedSettingsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FixedSettingsProvider",
    "MockCaptchaProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
