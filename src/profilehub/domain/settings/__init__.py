"""User settings domain: nested preferences with an audit history."""

from profilehub.domain.settings.aggregates import UserSettings
from profilehub.domain.settings.exceptions import SettingsNotFoundError
from profilehub.domain.settings.repositories import UserSettingsRepository
from profilehub.domain.settings.value_objects import (
    DEFAULT_TIMEZONE,
    UNKNOWN_ACTOR,
    AppearanceSettings,
    CommunicationSettings,
    DataManagementSettings,
    GeneralSettings,
    IntegrationSettings,
    NotificationSettings,
    PrivacySettings,
    SecuritySettings,
    SettingChange,
    Theme,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "UNKNOWN_ACTOR",
    "AppearanceSettings",
    "CommunicationSettings",
    "DataManagementSettings",
    "GeneralSettings",
    "IntegrationSettings",
    "NotificationSettings",
    "PrivacySettings",
    "SecuritySettings",
    "SettingChange",
    "SettingsNotFoundError",
    "Theme",
    "UserSettings",
    "UserSettingsRepository",
]
