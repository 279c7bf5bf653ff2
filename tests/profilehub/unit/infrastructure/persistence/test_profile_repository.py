"""Tests for ProfileRepositorySQLAlchemy."""

from datetime import date
from uuid import uuid4

import pytest

from profilehub.domain.profile import (
    Location,
    MediaReference,
    Profile,
    ProfileNotFoundError,
)


class TestProfileRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_round_trip_with_nested_groups(self, repositories, account):
        repo = repositories.profile_repository()
        profile = Profile.default(account.id)
        profile.apply_update(
            {
                "bio": "Analyst",
                "date_of_birth": "1815-12-10",
                "location": {"city": "London", "country": "UK"},
                "custom_fields": {"engine": "analytical"},
            }
        )
        profile.set_profile_picture(
            MediaReference(file_id=uuid4(), url="http://testserver/uploads/a.png")
        )
        profile.recalculate_completeness()

        await repo.save(profile)
        loaded = await repo.find_by_account_id(account.id)

        assert loaded.bio == "Analyst"
        assert loaded.date_of_birth == date(1815, 12, 10)
        assert loaded.location == Location(city="London", country="UK")
        assert loaded.profile_picture.file_id == profile.profile_picture.file_id
        assert loaded.custom_fields == {"engine": "analytical"}
        assert loaded.completeness_percent == profile.completeness_percent

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_view_count(self, repositories, account):
        repo = repositories.profile_repository()
        stale = Profile.default(account.id)
        await repo.save(stale)

        assert await repo.increment_views(account.id) == 1
        assert await repo.increment_views(account.id) == 2
        stale.bio = "updated"
        await repo.save(stale)

        loaded = await repo.find_by_account_id(account.id)
        assert loaded.view_count == 2
        assert loaded.bio == "updated"

    @pytest.mark.asyncio
    async def test_increment_views_of_missing_profile(self, repositories):
        with pytest.raises(ProfileNotFoundError):
            await repositories.profile_repository().increment_views(uuid4())

    @pytest.mark.asyncio
    async def test_delete_and_count(self, repositories, account):
        repo = repositories.profile_repository()
        await repo.save(Profile.default(account.id))

        assert await repo.count() == 1
        assert await repo.delete(account.id) is True
        assert await repo.delete(account.id) is False
        assert await repo.count() == 0
