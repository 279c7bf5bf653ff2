"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from profilehub.domain.files import FileCategory
from profilehub.domain.profile import MediaReference, ProfileNotFoundError
from profilehub.domain.shared.exceptions import ValidationError


async def _upload_picture(services, owner_id, name="me.png"):
    record = await services.files.upload(
        owner_id,
        b"\x89PNG fake image",
        name,
        "image/png",
        category=FileCategory.PROFILE_PICTURE,
        is_public=True,
    )
    return record, MediaReference(file_id=record.id, url=record.public_url)


class TestUpdate:
    @pytest.mark.asyncio
    async def test_recomputes_completeness(self, services):
        account = await services.register()
        before = (await services.profiles.get(account.id)).completeness_percent

        profile = await services.profiles.update(
            account.id,
            {"bio": "Mathematician", "location": {"city": "London"}},
        )

        assert profile.completeness_percent > before
        assert profile.last_profile_update is not None
        stored = await services.profiles.get(account.id)
        assert stored.location.city == "London"
        assert stored.completeness_percent == profile.completeness_percent

    @pytest.mark.asyncio
    async def test_nested_update_keeps_sibling_fields(self, services):
        account = await services.register()
        await services.profiles.update(
            account.id, {"location": {"city": "London", "country": "UK"}}
        )

        profile = await services.profiles.update(
            account.id, {"location": {"city": "Paris"}}
        )

        assert profile.location.city == "Paris"
        assert profile.location.country == "UK"

    @pytest.mark.asyncio
    async def test_creates_profile_on_first_update(self, services):
        account_id = uuid4()

        profile = await services.profiles.update(account_id, {"bio": "hello"})

        assert profile.bio == "hello"

    @pytest.mark.asyncio
    async def test_rejected_update_leaves_store_untouched(self, services):
        account = await services.register()

        with pytest.raises(ValidationError):
            await services.profiles.update(
                account.id, {"bio": "changed", "gender": "not-a-gender"}
            )

        assert (await services.profiles.get(account.id)).bio == ""


class TestMedia:
    @pytest.mark.asyncio
    async def test_replacing_picture_removes_old_file(self, services):
        account = await services.register()
        old_record, old_ref = await _upload_picture(services, account.id)
        await services.profiles.set_profile_picture(account.id, old_ref)
        new_record, new_ref = await _upload_picture(services, account.id, "new.png")

        profile = await services.profiles.set_profile_picture(account.id, new_ref)

        assert profile.profile_picture.file_id == new_record.id
        assert profile.profile_picture.uploaded_at is not None
        remaining = await services.files.list_by_owner(account.id)
        assert [r.id for r in remaining] == [new_record.id]

    @pytest.mark.asyncio
    async def test_same_picture_twice_keeps_file(self, services):
        account = await services.register()
        record, ref = await _upload_picture(services, account.id)

        await services.profiles.set_profile_picture(account.id, ref)
        await services.profiles.set_profile_picture(account.id, ref)

        assert (await services.files.get(record.id)).id == record.id

    @pytest.mark.asyncio
    async def test_picture_counts_towards_completeness(self, services):
        account = await services.register()
        _, ref = await _upload_picture(services, account.id)

        profile = await services.profiles.set_profile_picture(account.id, ref)

        assert profile.completeness_percent == 17


class TestViews:
    @pytest.mark.asyncio
    async def test_increment_views(self, services):
        account = await services.register()

        await services.profiles.increment_views(account.id)
        count = await services.profiles.increment_views(account.id)

        assert count == 2
        assert (await services.profiles.get(account.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_updates_do_not_reset_view_count(self, services):
        account = await services.register()
        await services.profiles.increment_views(account.id)

        await services.profiles.update(account.id, {"bio": "hi"})

        assert (await services.profiles.get(account.id)).view_count == 1

    @pytest.mark.asyncio
    async def test_unknown_profile(self, services):
        with pytest.raises(ProfileNotFoundError):
            await services.profiles.increment_views(uuid4())
