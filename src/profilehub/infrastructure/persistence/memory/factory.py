"""In-memory repository factory."""

from profilehub.infrastructure.persistence.memory.account_repository import (
    AccountRepositoryMemory,
)
from profilehub.infrastructure.persistence.memory.file_record_repository import (
    FileRecordRepositoryMemory,
)
from profilehub.infrastructure.persistence.memory.profile_repository import (
    ProfileRepositoryMemory,
)
from profilehub.infrastructure.persistence.memory.user_settings_repository import (
    UserSettingsRepositoryMemory,
)


class MemoryRepositoryFactory:
    """In-memory implementation of the RepositoryFactory Protocol.

    Each factory owns one isolated set of stores; data lives as long as
    the factory does.
    """

    def __init__(self) -> None:
        self._account_repo = AccountRepositoryMemory()
        self._profile_repo = ProfileRepositoryMemory()
        self._settings_repo = UserSettingsRepositoryMemory()
        self._file_repo = FileRecordRepositoryMemory()

    def account_repository(self) -> AccountRepositoryMemory:
        return self._account_repo

    def profile_repository(self) -> ProfileRepositoryMemory:
        return self._profile_repo

    def settings_repository(self) -> UserSettingsRepositoryMemory:
        return self._settings_repo

    def file_repository(self) -> FileRecordRepositoryMemory:
        return self._file_repo
