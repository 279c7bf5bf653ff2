"""Overall data completeness across account, profile and settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from profilehub.domain.profile import is_filled, percent_of
from profilehub.domain.settings import DEFAULT_TIMEZONE
from profilehub.domain.shared.dotted_path import get_path

if TYPE_CHECKING:
    from profilehub.domain.profile import Profile
    from profilehub.domain.settings import UserSettings

ACCOUNT_SIGNALS = ("name", "email", "phone_number")
PROFILE_SIGNALS = ("bio", "date_of_birth", "location.city", "profile_picture.url")


def calculate_overall_completeness(
    account: Any,
    profile: Profile,
    settings: UserSettings,
) -> int:
    """Percentage of the eight tracked signals that are populated.

    ``account`` may be an Account or an AccountDTO; only the attributes
    named in ACCOUNT_SIGNALS are read. The settings signal counts when
    the timezone was changed from the default.
    """
    signals = [is_filled(getattr(account, name, None)) for name in ACCOUNT_SIGNALS]
    signals.extend(is_filled(get_path(profile, path)) for path in PROFILE_SIGNALS)
    signals.append(settings.general.timezone != DEFAULT_TIMEZONE)
    return percent_of(sum(signals), len(signals))
