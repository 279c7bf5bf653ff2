from profilehub.domain.settings.repositories.user_settings_repository import (
    UserSettingsRepository,
)

__all__ = ["UserSettingsRepository"]
