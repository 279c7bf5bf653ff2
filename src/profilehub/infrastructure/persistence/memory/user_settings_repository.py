"""In-memory implementation of UserSettingsRepository."""

import copy
from uuid import UUID

from profilehub.domain.settings import UserSettings, UserSettingsRepository


class UserSettingsRepositoryMemory(UserSettingsRepository):
    def __init__(self) -> None:
        self._settings: dict[UUID, UserSettings] = {}

    async def find(self, account_id: UUID) -> UserSettings | None:
        settings = self._settings.get(account_id)
        return copy.deepcopy(settings) if settings else None

    async def save(self, settings: UserSettings) -> None:
        self._settings[settings.account_id] = copy.deepcopy(settings)

    async def insert_if_absent(self, settings: UserSettings) -> UserSettings:
        stored = self._settings.setdefault(settings.account_id, copy.deepcopy(settings))
        return copy.deepcopy(stored)

    async def delete(self, account_id: UUID) -> bool:
        return self._settings.pop(account_id, None) is not None
