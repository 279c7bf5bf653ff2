"""API tests for file uploads, versions and sharing."""

import pytest

from tests.shared.fixtures.api import PNG, bearer, register, upload

pytestmark = pytest.mark.integration


class TestUpload:
    def test_upload_with_metadata(self, client, user_headers):
        response = upload(
            client,
            user_headers,
            category="image",
            tags="travel, 2024",
            is_public="true",
        )

        assert response.status_code == 201, response.text
        body = response.json()
        assert body["category"] == "image"
        assert body["tags"] == ["travel", "2024"]
        assert body["is_public"] is True
        assert body["version"] == 1
        assert "storage_path" not in body

    def test_empty_file(self, client, user_headers):
        response = upload(client, user_headers, content=b"")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_UPLOAD"

    def test_stats(self, client, api_v1_prefix, user_headers):
        upload(client, user_headers, category="image")
        upload(client, user_headers, category="document")

        stats = client.get(f"{api_v1_prefix}/files/stats", headers=user_headers)

        assert stats.status_code == 200
        assert stats.json()["total_files"] == 2
        assert stats.json()["total_size_bytes"] == 2 * len(PNG)


class TestFileLifecycle:
    def test_versions_and_downloads(self, client, api_v1_prefix, user_headers):
        file_id = upload(client, user_headers).json()["id"]

        version = client.post(
            f"{api_v1_prefix}/files/{file_id}/versions",
            headers=user_headers,
            files={"file": ("v2.png", PNG + b"2", "image/png")},
        )
        download = client.post(
            f"{api_v1_prefix}/files/{file_id}/downloads", headers=user_headers
        )

        assert version.status_code == 200, version.text
        assert version.json()["version"] == 2
        assert download.json()["download_count"] == 1

    def test_private_files_are_hidden_from_others(
        self, client, api_v1_prefix, user_headers
    ):
        file_id = upload(client, user_headers).json()["id"]
        other = bearer(register(client, "other@example.com", "Other"))

        response = client.get(f"{api_v1_prefix}/files/{file_id}", headers=other)

        assert response.status_code == 404

    def test_grant_access(self, client, api_v1_prefix, user_headers):
        file_id = upload(client, user_headers).json()["id"]
        other_auth = register(client, "other@example.com", "Other")

        grant = client.post(
            f"{api_v1_prefix}/files/{file_id}/grants",
            headers=user_headers,
            json={"principal_id": other_auth["account"]["id"]},
        )
        response = client.get(
            f"{api_v1_prefix}/files/{file_id}", headers=bearer(other_auth)
        )

        assert grant.status_code == 200, grant.text
        assert response.status_code == 200

    def test_delete(self, client, api_v1_prefix, user_headers):
        file_id = upload(client, user_headers).json()["id"]
        url = f"{api_v1_prefix}/files/{file_id}"

        deleted = client.delete(url, headers=user_headers)
        again = client.get(url, headers=user_headers)

        assert deleted.status_code == 204
        assert again.status_code == 404
