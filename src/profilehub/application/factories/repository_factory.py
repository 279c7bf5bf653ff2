"""Repository factory protocol for application layer."""

from typing import Protocol

from profilehub.domain.account import AccountRepository
from profilehub.domain.files import FileRecordRepository
from profilehub.domain.profile import ProfileRepository
from profilehub.domain.settings import UserSettingsRepository


class RepositoryFactory(Protocol):
    """Protocol for obtaining the four stores of one storage backend.

    Implementations are selected once at startup (in-memory or SQLAlchemy)
    and return the same repository instance on every call.
    """

    def account_repository(self) -> AccountRepository:
        """Get account (credential) repository."""
        ...

    def profile_repository(self) -> ProfileRepository:
        """Get profile repository."""
        ...

    def settings_repository(self) -> UserSettingsRepository:
        """Get user settings repository."""
        ...

    def file_repository(self) -> FileRecordRepository:
        """Get file record repository."""
        ...
