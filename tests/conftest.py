# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Callable, Dict, Generator

from main import create_app
from dependencies.auth import CurrentUser, create_access_token


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """Build a bearer header for a user with the given role."""
    def _headers(role: str, user_id: str = "user-1", **claims) -> Dict[str, str]:
        token = create_access_token(user_id, role, **claims)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def mock_technician_user():
    return CurrentUser(
        id="tech-7",
        username="pat.tech",
        email="tech@example.com",
        role="technician",
        organization_id=1,
    )


@pytest.fixture
def mock_client_user():
    return CurrentUser(
        id="42",
        username="pool.owner",
        email="owner@example.com",
        role="client",
        organization_id=1,
    )
