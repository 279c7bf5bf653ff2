"""SQLAlchemy repository factory."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from profilehub.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from profilehub.infrastructure.persistence.sqlalchemy.repositories.file_record_repository import (  # NOQA: E501
    FileRecordRepositorySQLAlchemy,
)
from profilehub.infrastructure.persistence.sqlalchemy.repositories.profile_repository import (  # NOQA: E501
    ProfileRepositorySQLAlchemy,
)
from profilehub.infrastructure.persistence.sqlalchemy.repositories.user_settings_repository import (  # NOQA: E501
    UserSettingsRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    Repositories share one session maker and open a session per
    operation, so they are safe to use from concurrent tasks.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker
        self._account_repo = AccountRepositorySQLAlchemy(session_maker)
        self._profile_repo = ProfileRepositorySQLAlchemy(session_maker)
        self._settings_repo = UserSettingsRepositorySQLAlchemy(session_maker)
        self._file_repo = FileRecordRepositorySQLAlchemy(session_maker)

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker

    def account_repository(self) -> AccountRepositorySQLAlchemy:
        return self._account_repo

    def profile_repository(self) -> ProfileRepositorySQLAlchemy:
        return self._profile_repo

    def settings_repository(self) -> UserSettingsRepositorySQLAlchemy:
        return self._settings_repo

    def file_repository(self) -> FileRecordRepositorySQLAlchemy:
        return self._file_repo
