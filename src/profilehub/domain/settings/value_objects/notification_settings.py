"""Per-channel notification settings.

Each channel has an ``enabled`` switch and a set of category flags; the
email channel additionally has a delivery frequency.
"""

from dataclasses import dataclass, field
from enum import Enum


class EmailFrequency(str, Enum):
    INSTANT = "instant"
    DAILY = "daily"
    WEEKLY = "weekly"
    NEVER = "never"


@dataclass(frozen=True)
class EmailCategories:
    security: bool = True
    account: bool = True
    marketing: bool = False
    updates: bool = True
    social: bool = True


@dataclass(frozen=True)
class SmsCategories:
    security: bool = True
    account: bool = False


@dataclass(frozen=True)
class PushCategories:
    messages: bool = True
    updates: bool = True
    marketing: bool = False


@dataclass(frozen=True)
class EmailChannel:
    enabled: bool = True
    frequency: EmailFrequency = EmailFrequency.INSTANT
    categories: EmailCategories = field(default_factory=EmailCategories)


@dataclass(frozen=True)
class SmsChannel:
    enabled: bool = False
    categories: SmsCategories = field(default_factory=SmsCategories)


@dataclass(frozen=True)
class PushChannel:
    enabled: bool = True
    categories: PushCategories = field(default_factory=PushCategories)


@dataclass(frozen=True)
class NotificationSettings:
    email: EmailChannel = field(default_factory=EmailChannel)
    sms: SmsChannel = field(default_factory=SmsChannel)
    push: PushChannel = field(default_factory=PushChannel)
