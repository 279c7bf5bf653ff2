"""API tests for the complete user view and profile updates."""

import pytest

from tests.shared.fixtures.api import PNG, bearer, register

pytestmark = pytest.mark.integration


class TestCompleteView:
    def test_view_of_new_account(self, client, api_v1_prefix, user_headers):
        response = client.get(f"{api_v1_prefix}/profile", headers=user_headers)

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["account"]["email"] == "ada@example.com"
        assert body["profile"]["bio"] == ""
        assert body["settings"]["general"]["timezone"] == "UTC"
        assert body["files"] == []
        assert body["file_stats"]["total_files"] == 0
        assert body["overall_completeness"] == 25

    def test_requires_authentication(self, client, api_v1_prefix):
        assert client.get(f"{api_v1_prefix}/profile").status_code == 401


class TestUpdateProfile:
    def test_partial_update(self, client, api_v1_prefix, user_headers):
        response = client.patch(
            f"{api_v1_prefix}/profile",
            headers=user_headers,
            json={"bio": "Analyst", "location": {"city": "London"}},
        )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["bio"] == "Analyst"
        assert body["location"]["city"] == "London"
        assert body["completeness_percent"] == 33

    def test_null_bio_clears_it(self, client, api_v1_prefix, user_headers):
        url = f"{api_v1_prefix}/profile"
        client.patch(url, headers=user_headers, json={"bio": "Analyst"})

        response = client.patch(url, headers=user_headers, json={"bio": None})

        assert response.status_code == 200, response.text
        assert response.json()["bio"] == ""

    def test_unknown_nested_field(self, client, api_v1_prefix, user_headers):
        response = client.patch(
            f"{api_v1_prefix}/profile",
            headers=user_headers,
            json={"location": {"planet": "Mars"}},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_top_level_field(self, client, api_v1_prefix, user_headers):
        response = client.patch(
            f"{api_v1_prefix}/profile",
            headers=user_headers,
            json={"view_count": 1000},
        )

        assert response.status_code == 422


class TestPictures:
    def test_upload_picture_and_replace_it(self, client, api_v1_prefix, user_headers):
        def upload_picture(name):
            return client.post(
                f"{api_v1_prefix}/profile/picture",
                headers=user_headers,
                files={"file": (name, PNG, "image/png")},
            )

        first = upload_picture("first.png").json()
        second = upload_picture("second.png")

        assert second.status_code == 200, second.text
        picture = second.json()["profile_picture"]
        assert picture["file_id"] != first["profile_picture"]["file_id"]
        assert picture["url"].startswith("http://testserver/uploads/")
        files = client.get(f"{api_v1_prefix}/files", headers=user_headers).json()
        assert [f["id"] for f in files] == [picture["file_id"]]
        assert files[0]["category"] == "profile-picture"

    def test_uploaded_picture_is_served(self, client, api_v1_prefix, user_headers):
        response = client.post(
            f"{api_v1_prefix}/profile/cover",
            headers=user_headers,
            files={"file": ("cover.png", PNG, "image/png")},
        )
        url = response.json()["cover_photo"]["url"]

        served = client.get(url.removeprefix("http://testserver"))

        assert served.status_code == 200
        assert served.content == PNG

    def test_rejects_non_images(self, client, api_v1_prefix, user_headers):
        response = client.post(
            f"{api_v1_prefix}/profile/picture",
            headers=user_headers,
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_UPLOAD"


class TestViews:
    def test_count_views_of_another_profile(self, client, api_v1_prefix, user_auth):
        viewer = bearer(register(client, "viewer@example.com", "Viewer"))
        target = user_auth["account"]["id"]

        client.post(f"{api_v1_prefix}/profile/{target}/views", headers=viewer)
        response = client.post(
            f"{api_v1_prefix}/profile/{target}/views", headers=viewer
        )

        assert response.json() == {"view_count": 2}

    def test_unknown_profile(self, client, api_v1_prefix, user_headers):
        response = client.post(
            f"{api_v1_prefix}/profile/00000000-0000-0000-0000-000000000000/views",
            headers=user_headers,
        )

        assert response.status_code == 404
