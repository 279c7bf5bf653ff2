from profilehub.domain.profile.value_objects.contact import (
    EmergencyContact,
    SocialLinks,
)
from profilehub.domain.profile.value_objects.gender import Gender
from profilehub.domain.profile.value_objects.location import Coordinates, Location
from profilehub.domain.profile.value_objects.media_reference import MediaReference
from profilehub.domain.profile.value_objects.privacy import (
    NotificationPreferences,
    ProfilePrivacy,
    ProfileVisibility,
)

__all__ = [
    "Coordinates",
    "EmergencyContact",
    "Gender",
    "Location",
    "MediaReference",
    "NotificationPreferences",
    "ProfilePrivacy",
    "ProfileVisibility",
    "SocialLinks",
]
