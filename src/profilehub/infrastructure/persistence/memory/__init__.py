"""In-memory repositories, used by default and in unit tests."""

from profilehub.infrastructure.persistence.memory.account_repository import (
    AccountRepositoryMemory,
)
from profilehub.infrastructure.persistence.memory.factory import (
    MemoryRepositoryFactory,
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

__all__ = [
    "AccountRepositoryMemory",
    "FileRecordRepositoryMemory",
    "MemoryRepositoryFactory",
    "ProfileRepositoryMemory",
    "UserSettingsRepositoryMemory",
]
