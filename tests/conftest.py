import pytest
from fastapi.testclient import TestClient

from war_api.main import app


@pytest.fixture
def client():
    """Provide a test client bound to the application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"
