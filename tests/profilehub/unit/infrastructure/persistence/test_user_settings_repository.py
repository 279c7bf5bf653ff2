"""Tests for UserSettingsRepositorySQLAlchemy."""

import pytest

from profilehub.domain.settings import Theme


class TestUserSettingsRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_get_or_create_defaults(self, repositories, account):
        repo = repositories.settings_repository()

        created = await repo.get_or_create(account.id)
        loaded = await repo.find(account.id)

        assert loaded.general.timezone == created.general.timezone
        assert loaded.change_history == []

    @pytest.mark.asyncio
    async def test_history_keeps_order_across_saves(self, repositories, account):
        repo = repositories.settings_repository()
        settings = await repo.get_or_create(account.id)

        settings.update_setting("appearance.theme", "dark", changed_by="ada")
        await repo.save(settings)
        settings = await repo.find(account.id)
        settings.update_setting("general.timezone", "Europe/London")
        settings.reset(changed_by="ada")
        await repo.save(settings)

        loaded = await repo.find(account.id)
        assert [c.setting_path for c in loaded.change_history] == [
            "appearance.theme",
            "general.timezone",
            "general.timezone",
            "appearance.theme",
        ]
        assert loaded.appearance.theme == Theme.LIGHT
        assert loaded.history(1)[0].new_value == "light"

    @pytest.mark.asyncio
    async def test_custom_settings_survive(self, repositories, account):
        repo = repositories.settings_repository()
        settings = await repo.get_or_create(account.id)
        settings.update_setting("custom_settings.editor", {"keymap": "vim"})
        await repo.save(settings)

        loaded = await repo.find(account.id)

        assert loaded.custom_settings == {"editor": {"keymap": "vim"}}
        assert loaded.change_history[0].new_value == {"keymap": "vim"}

    @pytest.mark.asyncio
    async def test_delete_removes_history(self, repositories, account):
        repo = repositories.settings_repository()
        settings = await repo.get_or_create(account.id)
        settings.update_setting("appearance.theme", "dark")
        await repo.save(settings)

        assert await repo.delete(account.id) is True
        assert await repo.find(account.id) is None
        assert await repo.delete(account.id) is False
