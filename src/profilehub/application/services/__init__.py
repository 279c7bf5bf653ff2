from profilehub.application.services.account_service import AccountService
from profilehub.application.services.completeness import (
    calculate_overall_completeness,
)
from profilehub.application.services.file_record_service import FileRecordService
from profilehub.application.services.profile_service import ProfileService
from profilehub.application.services.settings_service import SettingsService
from profilehub.application.services.user_data_service import UserDataService

__all__ = [
    "AccountService",
    "FileRecordService",
    "ProfileService",
    "SettingsService",
    "UserDataService",
    "calculate_overall_completeness",
]
