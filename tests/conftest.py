"""Root pytest configuration.

Test Structure:
    tests/
    ├── profilehub/            # Core tests
    │   ├── unit/              # Fast, isolated tests (memory stores, SQLite)
    │   └── integration/       # HTTP API through FastAPI's TestClient
    ├── profilehub_auth/       # Password hashing and JWT tests
    └── shared/                # Shared fixtures and builders
"""

import os

import pytest

# Settings require a JWT secret; tests never read config/.env files
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only-0123456789")
os.environ.setdefault("PROFILEHUB_ENV_FILE", "config/.env.test")

from profilehub_config import clear_settings_cache  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise the HTTP API or a real database",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
