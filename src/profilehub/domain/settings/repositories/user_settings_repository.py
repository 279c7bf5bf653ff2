"""Abstract repository for user settings."""

from abc import ABC, abstractmethod
from uuid import UUID

from profilehub.domain.settings.aggregates import UserSettings


class UserSettingsRepository(ABC):
    """Repository interface for UserSettings aggregate, keyed by account id."""

    @abstractmethod
    async def find(self, account_id: UUID) -> UserSettings | None:
        """Find settings for an account, returns None if not exists."""

    @abstractmethod
    async def save(self, settings: UserSettings) -> None:
        """Save user settings, including newly appended history entries."""

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete user settings and their history. Returns True if deleted."""

    @abstractmethod
    async def insert_if_absent(self, settings: UserSettings) -> UserSettings:
        """Store ``settings`` unless the account already has a row.

        Returns whichever settings are stored afterwards, so concurrent
        callers all see the same row.
        """

    async def get_or_create(self, account_id: UUID) -> UserSettings:
        """Get user settings, creating defaults if not exists."""
        settings = await self.find(account_id)
        if settings is not None:
            return settings
        return await self.insert_if_absent(UserSettings.default(account_id))
