"""Value objects for user settings."""

from profilehub.domain.settings.value_objects.appearance_settings import (
    AppearanceSettings,
    FontSize,
    Theme,
)
from profilehub.domain.settings.value_objects.communication_settings import (
    CommunicationSettings,
    ContactMethod,
)
from profilehub.domain.settings.value_objects.data_management_settings import (
    BackupFrequency,
    DataManagementSettings,
    ExportFormat,
)
from profilehub.domain.settings.value_objects.general_settings import (
    DEFAULT_TIMEZONE,
    DateFormat,
    GeneralSettings,
    Language,
    TimeFormat,
)
from profilehub.domain.settings.value_objects.integration_settings import (
    ApiAccessSettings,
    IntegrationSettings,
    RateLimitTier,
    SocialLoginSettings,
)
from profilehub.domain.settings.value_objects.notification_settings import (
    EmailCategories,
    EmailChannel,
    EmailFrequency,
    NotificationSettings,
    PushCategories,
    PushChannel,
    SmsCategories,
    SmsChannel,
)
from profilehub.domain.settings.value_objects.privacy_settings import PrivacySettings
from profilehub.domain.settings.value_objects.security_settings import (
    SecuritySettings,
    TwoFactorMethod,
)
from profilehub.domain.settings.value_objects.setting_change import (
    UNKNOWN_ACTOR,
    SettingChange,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "UNKNOWN_ACTOR",
    "ApiAccessSettings",
    "AppearanceSettings",
    "BackupFrequency",
    "CommunicationSettings",
    "ContactMethod",
    "DataManagementSettings",
    "DateFormat",
    "EmailCategories",
    "EmailChannel",
    "EmailFrequency",
    "ExportFormat",
    "FontSize",
    "GeneralSettings",
    "IntegrationSettings",
    "Language",
    "NotificationSettings",
    "PrivacySettings",
    "PushCategories",
    "PushChannel",
    "RateLimitTier",
    "SecuritySettings",
    "SettingChange",
    "SmsCategories",
    "SmsChannel",
    "SocialLoginSettings",
    "Theme",
    "TimeFormat",
    "TwoFactorMethod",
]
