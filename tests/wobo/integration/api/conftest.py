"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.factories import JANE, JOHN, make_settings
from wobo.presentation.api.app import API_V1_PREFIX, create_app
from wobo_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a SQLite file for this test only."""
    return make_settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client; the lifespan creates the schema."""
    app = create_app(settings=api_settings)

    # Unhandled errors should reach the 500 handler, not the test
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def john(test_client, api_v1_prefix) -> dict:
    """Register John and return the created user."""
    response = test_client.post(f"{api_v1_prefix}/users", json=JOHN)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def jane(test_client, api_v1_prefix) -> dict:
    response = test_client.post(f"{api_v1_prefix}/users", json=JANE)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(test_client, api_v1_prefix, john) -> dict:
    """Bearer header for John."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": JOHN["email"], "password": JOHN["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
