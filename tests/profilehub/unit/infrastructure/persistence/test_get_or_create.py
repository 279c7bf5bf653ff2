"""Concurrent get-or-create against the SQLAlchemy repositories."""

import asyncio

import pytest

from profilehub.application.services import ProfileService, SettingsService
from profilehub.domain.profile import Profile
from profilehub.domain.settings import Theme, UserSettings


class TestInsertIfAbsent:
    @pytest.mark.asyncio
    async def test_existing_profile_wins(self, repositories, account):
        repo = repositories.profile_repository()
        first = Profile.default(account.id)
        first.apply_update({"bio": "first"})
        await repo.save(first)

        stored = await repo.insert_if_absent(Profile.default(account.id))

        assert stored.bio == "first"
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_existing_settings_win(self, repositories, account):
        repo = repositories.settings_repository()
        settings = UserSettings.default(account.id)
        settings.update_setting("appearance.theme", "dark", changed_by="ada")
        await repo.save(settings)

        stored = await repo.insert_if_absent(UserSettings.default(account.id))

        assert stored.appearance.theme == Theme.DARK
        assert len(stored.change_history) == 1


class TestConcurrentGetOrCreate:
    @pytest.mark.asyncio
    async def test_parallel_settings_creation(self, repositories, account):
        repo = repositories.settings_repository()

        results = await asyncio.gather(
            *(repo.get_or_create(account.id) for _ in range(4))
        )

        assert {r.account_id for r in results} == {account.id}
        assert await repo.find(account.id) is not None

    @pytest.mark.asyncio
    async def test_parallel_profile_creation(self, repositories, account):
        profiles = ProfileService.from_factory(repositories)

        results = await asyncio.gather(
            *(profiles.get_or_create(account.id) for _ in range(4))
        )

        assert {r.account_id for r in results} == {account.id}
        assert await repositories.profile_repository().count() == 1

    @pytest.mark.asyncio
    async def test_parallel_recreation_after_rows_were_lost(
        self, repositories, account
    ):
        profiles = ProfileService.from_factory(repositories)
        settings = SettingsService.from_factory(repositories)
        await profiles.get_or_create(account.id)
        await settings.get_or_create_defaults(account.id)
        await profiles.delete(account.id)
        await settings.delete(account.id)

        await asyncio.gather(
            profiles.get_or_create(account.id),
            settings.get_or_create_defaults(account.id),
            profiles.get_or_create(account.id),
            settings.get_or_create_defaults(account.id),
        )

        assert await repositories.profile_repository().count() == 1
        assert await repositories.settings_repository().find(account.id) is not None
