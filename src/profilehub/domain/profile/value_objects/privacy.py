"""Profile privacy and notification preference value objects."""

from dataclasses import dataclass
from enum import Enum


class ProfileVisibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    FRIENDS_ONLY = "friends-only"


@dataclass(frozen=True)
class ProfilePrivacy:
    visibility: ProfileVisibility = ProfileVisibility.PUBLIC
    show_email: bool = False
    show_phone: bool = False
    show_location: bool = False


@dataclass(frozen=True)
class NotificationPreferences:
    email: bool = True
    sms: bool = False
    push: bool = True
    marketing: bool = False
