"""Settings service: path-addressed updates with an audit trail."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping
from uuid import UUID

from profilehub.domain.settings import (
    SettingChange,
    SettingsNotFoundError,
    UserSettings,
)

if TYPE_CHECKING:
    from profilehub.application.factories import RepositoryFactory
    from profilehub.domain.settings import UserSettingsRepository

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class SettingsService:
    """Application service for user settings.

    Unlike profiles, settings are not created on update: callers must
    call :meth:`get_or_create_defaults` first.
    """

    def __init__(self, settings_repository: UserSettingsRepository):
        self._settings_repo = settings_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SettingsService:
        return cls(settings_repository=factory.settings_repository())

    async def get_or_create_defaults(self, account_id: UUID) -> UserSettings:
        return await self._settings_repo.get_or_create(account_id)

    async def get(self, account_id: UUID) -> UserSettings:
        settings = await self._settings_repo.find(account_id)
        if settings is None:
            raise SettingsNotFoundError(account_id)
        return settings

    async def update_setting(
        self,
        account_id: UUID,
        path: str,
        value: Any,
        actor: str | None = None,
    ) -> SettingChange:
        settings = await self.get(account_id)
        change = settings.update_setting(path, value, changed_by=actor)
        await self._settings_repo.save(settings)
        logger.debug(
            "Setting %s changed for account %s: %r -> %r",
            path,
            account_id,
            change.old_value,
            change.new_value,
        )
        return change

    async def update_settings(
        self,
        account_id: UUID,
        changes: Mapping[str, Any],
        actor: str | None = None,
    ) -> list[SettingChange]:
        settings = await self.get(account_id)
        recorded = settings.update_settings(changes, changed_by=actor)
        await self._settings_repo.save(settings)
        logger.debug(
            "%d settings changed for account %s", len(recorded), account_id
        )
        return recorded

    async def get_history(
        self,
        account_id: UUID,
        limit: int | None = DEFAULT_HISTORY_LIMIT,
    ) -> list[SettingChange]:
        settings = await self.get(account_id)
        return settings.history(limit)

    async def reset(
        self,
        account_id: UUID,
        actor: str | None = None,
    ) -> list[SettingChange]:
        settings = await self.get(account_id)
        recorded = settings.reset(changed_by=actor)
        await self._settings_repo.save(settings)
        logger.info(
            "Settings reset for account %s (%d values restored)",
            account_id,
            len(recorded),
        )
        return recorded

    async def delete(self, account_id: UUID) -> bool:
        deleted = await self._settings_repo.delete(account_id)
        if deleted:
            logger.info("Settings deleted for account %s", account_id)
        return deleted
