"""Infrastructure providers."""

# Import bases
from .captcha import CaptchaProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .captcha import ProdCaptchaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CaptchaProvider",
    "PersistenceProvider",
    "ProdCaptchaProvider",
    "ProdPersistenceProvider",
]
