"""Unit tests for SettingsService."""

from uuid import uuid4

import pytest

from profilehub.domain.settings import SettingsNotFoundError, Theme
from profilehub.domain.shared.exceptions import PathNotFoundError, ValidationError


class TestUpdates:
    @pytest.mark.asyncio
    async def test_update_is_persisted_with_history(self, services):
        account = await services.register()

        change = await services.settings.update_setting(
            account.id, "appearance.theme", "dark", actor="ada"
        )

        assert change.old_value == "light"
        assert change.new_value == "dark"
        assert change.changed_by == "ada"
        stored = await services.settings.get(account.id)
        assert stored.appearance.theme == Theme.DARK
        assert [c.setting_path for c in stored.history()] == ["appearance.theme"]

    @pytest.mark.asyncio
    async def test_missing_settings_are_not_created(self, services):
        account_id = uuid4()

        with pytest.raises(SettingsNotFoundError):
            await services.settings.update_setting(
                account_id, "appearance.theme", "dark"
            )

        with pytest.raises(SettingsNotFoundError):
            await services.settings.get(account_id)

    @pytest.mark.asyncio
    async def test_unknown_path(self, services):
        account = await services.register()

        with pytest.raises(PathNotFoundError):
            await services.settings.update_setting(
                account.id, "appearance.sparkles", True
            )

    @pytest.mark.asyncio
    async def test_bulk_update_is_all_or_nothing(self, services):
        account = await services.register()

        with pytest.raises(ValidationError):
            await services.settings.update_settings(
                account.id,
                {"appearance.theme": "dark", "notifications.email.enabled": "yes"},
            )

        stored = await services.settings.get(account.id)
        assert stored.appearance.theme == Theme.LIGHT
        assert stored.history() == []


class TestHistoryAndReset:
    @pytest.mark.asyncio
    async def test_history_newest_first_with_limit(self, services):
        account = await services.register()
        for tz in ("Europe/London", "Europe/Paris", "Asia/Tokyo"):
            await services.settings.update_setting(account.id, "general.timezone", tz)

        history = await services.settings.get_history(account.id, limit=2)

        assert [c.new_value for c in history] == ["Asia/Tokyo", "Europe/Paris"]

    @pytest.mark.asyncio
    async def test_reset_restores_defaults_and_records_changes(self, services):
        account = await services.register()
        await services.settings.update_settings(
            account.id,
            {"appearance.theme": "dark", "general.timezone": "Europe/Berlin"},
        )

        restored = await services.settings.reset(account.id, actor="admin")

        assert {c.setting_path for c in restored} == {
            "appearance.theme",
            "general.timezone",
        }
        stored = await services.settings.get(account.id)
        assert stored.general.timezone == "UTC"
        assert len(stored.change_history) == 4

    @pytest.mark.asyncio
    async def test_delete(self, services):
        account = await services.register()

        assert await services.settings.delete(account.id) is True
        assert await services.settings.delete(account.id) is False
