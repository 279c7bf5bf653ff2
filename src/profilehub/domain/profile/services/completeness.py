"""Profile completeness calculation.

A pure function over a Profile so it can be tested without storage. The
profile store calls it before every save.
"""

import math
from typing import TYPE_CHECKING, Any

from profilehub.domain.shared.dotted_path import get_path

if TYPE_CHECKING:
    from profilehub.domain.profile.aggregates.profile import Profile

PROFILE_COMPLETENESS_FIELDS: tuple[str, ...] = (
    "bio",
    "date_of_birth",
    "location.city",
    "location.country",
    "profile_picture.url",
    "social_links.linkedin",
)


def is_filled(value: Any) -> bool:
    """Return True for values that count as populated."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, bool):
        return value
    return True


def percent_of(filled: int, total: int) -> int:
    """Whole percentage, halves rounded up (3 of 8 -> 38, 1 of 8 -> 13)."""
    if total <= 0:
        return 0
    return math.floor(100 * filled / total + 0.5)


def calculate_profile_completeness(profile: "Profile") -> int:
    """Percentage of tracked profile fields that are filled, 0-100."""
    filled = sum(
        1 for path in PROFILE_COMPLETENESS_FIELDS if is_filled(get_path(profile, path))
    )
    return percent_of(filled, len(PROFILE_COMPLETENESS_FIELDS))
