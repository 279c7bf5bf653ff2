"""SQLAlchemy models; importing this package registers them on Base."""

from profilehub.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from profilehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from profilehub.infrastructure.persistence.sqlalchemy.models.file_record_model import (  # NOQA: E501
    FileRecordModel,
)
from profilehub.infrastructure.persistence.sqlalchemy.models.profile_model import (
    ProfileModel,
)
from profilehub.infrastructure.persistence.sqlalchemy.models.user_settings_model import (  # NOQA: E501
    SettingChangeModel,
    UserSettingsModel,
)

__all__ = [
    "AccountModel",
    "Base",
    "FileRecordModel",
    "ProfileModel",
    "SettingChangeModel",
    "TimestampMixin",
    "UserSettingsModel",
]
