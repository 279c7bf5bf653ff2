"""SQLAlchemy repository implementations."""

from profilehub.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # NOQA: E501
    AccountRepositorySQLAlchemy,
)
from profilehub.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
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

__all__ = [
    "AccountRepositorySQLAlchemy",
    "FileRecordRepositorySQLAlchemy",
    "ProfileRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserSettingsRepositorySQLAlchemy",
]
