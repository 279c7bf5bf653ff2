"""API tests for registration, login and the current account."""

import pytest

from tests.shared.fixtures.api import bearer, login, register
from tests.shared.fixtures.factories import TEST_PASSWORD

pytestmark = pytest.mark.integration


class TestRegister:
    def test_register_logs_in(self, client):
        body = register(client)

        assert body["token_type"] == "bearer"
        assert body["expires_in"] == 24 * 3600
        assert body["account"]["email"] == "ada@example.com"
        assert body["account"]["role"] == "user"
        assert "password_hash" not in body["account"]

    def test_duplicate_email(self, client, api_v1_prefix, user_auth):  # noqa: ARG002
        response = client.post(
            f"{api_v1_prefix}/auth/register",
            json={
                "name": "Other",
                "email": "ADA@example.com",
                "password": TEST_PASSWORD,
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    def test_short_password_fails_validation(self, client, api_v1_prefix):
        response = client.post(
            f"{api_v1_prefix}/auth/register",
            json={"name": "Ada", "email": "ada@example.com", "password": "short"},
        )

        assert response.status_code == 422


class TestLogin:
    def test_wrong_password(self, client, api_v1_prefix, user_auth):  # noqa: ARG002
        response = client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "ada@example.com", "password": "not-the-password"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_login_records_last_login(self, client, user_auth):  # noqa: ARG002
        body = login(client, "ada@example.com")

        assert body["account"]["last_login_at"] is not None


class TestMe:
    def test_requires_token(self, client, api_v1_prefix):
        response = client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401

    def test_rejects_garbage_token(self, client, api_v1_prefix):
        response = client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401

    def test_update_me(self, client, api_v1_prefix, user_headers):
        response = client.patch(
            f"{api_v1_prefix}/auth/me",
            headers=user_headers,
            json={"name": "Augusta Ada King", "phone_number": "555-0100"},
        )

        assert response.status_code == 200, response.text
        assert response.json()["name"] == "Augusta Ada King"
        me = client.get(f"{api_v1_prefix}/auth/me", headers=user_headers).json()
        assert me["phone_number"] == "555-0100"

    def test_change_password(self, client, api_v1_prefix, user_headers):
        response = client.post(
            f"{api_v1_prefix}/auth/me/password",
            headers=user_headers,
            json={
                "current_password": TEST_PASSWORD,
                "new_password": "a-brand-new-password",
            },
        )

        assert response.status_code == 204
        assert bearer(login(client, "ada@example.com", "a-brand-new-password"))
