"""Unit tests for the Turnstile verifiers."""

import pytest

from comet.adapter.error import ProviderError
from comet.adapter.turnstile import (
    DisabledTurnstileVerifier,
    MockTurnstileVerifier,
    RealTurnstileVerifier,
)


class TestRealTurnstileVerifier:
    """Tests for RealTurnstileVerifier with the HTTP call stubbed out."""

    @pytest.mark.asyncio
    async def test_missing_token_fails_without_request(self, monkeypatch):
        verifier = RealTurnstileVerifier(secret_key="secret")

        async def _fail(*args, **kwargs):
            raise AssertionError("siteverify must not be called")

        monkeypatch.setattr(verifier, "_siteverify", _fail)

        assert await verifier.verify(None) is False
        assert await verifier.verify("") is False

    @pytest.mark.asyncio
    async def test_success_response(self, monkeypatch):
        verifier = RealTurnstileVerifier(secret_key="secret")
        seen = {}

        async def _siteverify(token, remote_ip):
            seen.update(token=token, remote_ip=remote_ip)
            return {"success": True}

        monkeypatch.setattr(verifier, "_siteverify", _siteverify)

        assert await verifier.verify("token", "203.0.113.7") is True
        assert seen == {"token": "token", "remote_ip": "203.0.113.7"}

    @pytest.mark.asyncio
    async def test_rejected_response(self, monkeypatch):
        verifier = RealTurnstileVerifier(secret_key="secret")

        async def _siteverify(token, remote_ip):
            return {"success": False, "error-codes": ["invalid-input-response"]}

        monkeypatch.setattr(verifier, "_siteverify", _siteverify)

        assert await verifier.verify("token") is False

    @pytest.mark.asyncio
    async def test_transport_failure_counts_as_rejection(self, monkeypatch):
        verifier = RealTurnstileVerifier(secret_key="secret")

        async def _siteverify(token, remote_ip):
            raise ProviderError("connection refused")

        monkeypatch.setattr(verifier, "_siteverify", _siteverify)

        assert await verifier.verify("token") is False


@pytest.mark.asyncio
async def test_disabled_verifier_accepts_everything():
    assert await DisabledTurnstileVerifier().verify(None) is True


@pytest.mark.asyncio
async def test_mock_verifier_records_calls():
    verifier = MockTurnstileVerifier()

    assert await verifier.verify("ok") is True
    assert await verifier.verify(MockTurnstileVerifier.REJECTED_TOKEN) is False
    assert await verifier.verify(None) is False
    assert verifier.calls == ["ok", "rejected", None]
