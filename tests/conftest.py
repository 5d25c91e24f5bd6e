"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, application, client and payload fixtures.

==============================================================================
"""

import pytest
from typing import Any, Dict, Generator
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import Application


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Explicit settings so tests never depend on the environment."""
    return Settings(
        app_env="development",
        debug=False,
        cors_origins='["*"]',
        json_write_indented=True,
    )


@pytest.fixture
def application(settings: Settings) -> Application:
    """Fresh application per test."""
    return Application(settings)


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Test client bound to a fresh application."""
    with TestClient(application.app) as test_client:
        yield test_client


@pytest.fixture
def fault_client(application: Application) -> Generator[TestClient, None, None]:
    """Test client that returns 500 responses instead of raising."""
    with TestClient(application.app, raise_server_exceptions=False) as test_client:
        yield test_client
    application.app.dependency_overrides.clear()


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================

@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    """A candidate that satisfies every rule."""
    return {
        "id": 3,
        "name": "Keyboard",
        "price": 19.99,
        "stock": 10,
        "category": {"id": 101, "name": "Electronics"},
    }
