"""Fixtures for end-to-end tests against the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

from comet.config import AuthSettings, Settings
from comet.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def settings():
    return Settings(
        auth=AuthSettings(admin_password="admin-pass", jwt_secret="test-secret")
    )


@pytest.fixture
def client(settings):
    """Test client over a fresh, fully mocked container."""
    app = create_app(
        settings=settings, container=build_test_container(settings=settings)
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client, settings):
    """Test client holding an admin session cookie."""
    response = client.post("/login", json={"password": settings.auth.admin_password})
    assert response.json()["success"] is True
    return client


@pytest.fixture
def post_comment(client):
    """Post a comment through the API with a passing CAPTCHA token by default."""

    def _post(area_key, content, parent_id=None, token="valid"):
        return client.post(
            f"/area/{area_key}/comment",
            json={
                "content": content,
                "parent_id": parent_id,
                "cf-turnstile-response": token,
            },
        )

    return _post
