"""Fixtures for HTTP API tests.

Each test runs a fresh application over in-memory stores, with uploads
written below tmp_path. Entering the TestClient runs the lifespan, which
creates the initial administrator.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from profilehub.presentation.api.app import API_V1_PREFIX, create_app
from profilehub_config import Settings
from tests.shared.fixtures.api import ADMIN_EMAIL, bearer, login, register
from tests.shared.fixtures.factories import (
    TEST_BCRYPT_ROUNDS,
    TEST_JWT_SECRET,
    TEST_PASSWORD,
)


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        storage_backend="memory",
        upload_dir=str(tmp_path / "uploads"),
        public_base_url="http://testserver",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        initial_admin_email=ADMIN_EMAIL,
        initial_admin_password=SecretStr(TEST_PASSWORD),
        log_level="WARNING",
    )


@pytest.fixture
def client(api_settings):
    with TestClient(create_app(api_settings)) as test_client:
        yield test_client


@pytest.fixture
def user_auth(client) -> dict:
    return register(client)


@pytest.fixture
def user_headers(user_auth) -> dict[str, str]:
    return bearer(user_auth)


@pytest.fixture
def admin_headers(client) -> dict[str, str]:
    return bearer(login(client, ADMIN_EMAIL))
