"""Cloudflare Turnstile adapter."""

from .client import (
    DisabledTurnstileVerifier,
    MockTurnstileVerifier,
    RealTurnstileVerifier,
    TurnstileVerifier,
)

__all__ = [
    "DisabledTurnstileVerifier",
    "MockTurnstileVerifier",
    "RealTurnstileVerifier",
    "TurnstileVerifier",
]
