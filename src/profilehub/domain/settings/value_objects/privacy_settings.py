from dataclasses import dataclass

from profilehub.domain.profile.value_objects import ProfileVisibility


@dataclass(frozen=True)
class PrivacySettings:
    profile_visibility: ProfileVisibility = ProfileVisibility.PUBLIC
    show_online_status: bool = True
    allow_search_engine_indexing: bool = True
    data_processing_consent: bool = False
    analytics_consent: bool = False
