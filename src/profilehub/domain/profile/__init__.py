"""Profile domain: personal and display data, one profile per account."""

from profilehub.domain.profile.aggregates import BIO_MAX_LENGTH, Profile
from profilehub.domain.profile.exceptions import ProfileNotFoundError
from profilehub.domain.profile.repositories import ProfileRepository
from profilehub.domain.profile.services import (
    PROFILE_COMPLETENESS_FIELDS,
    calculate_profile_completeness,
    is_filled,
    percent_of,
)
from profilehub.domain.profile.value_objects import (
    Coordinates,
    EmergencyContact,
    Gender,
    Location,
    MediaReference,
    NotificationPreferences,
    ProfilePrivacy,
    ProfileVisibility,
    SocialLinks,
)

__all__ = [
    "BIO_MAX_LENGTH",
    "PROFILE_COMPLETENESS_FIELDS",
    "Coordinates",
    "EmergencyContact",
    "Gender",
    "Location",
    "MediaReference",
    "NotificationPreferences",
    "Profile",
    "ProfileNotFoundError",
    "ProfilePrivacy",
    "ProfileRepository",
    "ProfileVisibility",
    "SocialLinks",
    "calculate_profile_completeness",
    "is_filled",
    "percent_of",
]
