from profilehub.domain.profile.services.completeness import (
    PROFILE_COMPLETENESS_FIELDS,
    calculate_profile_completeness,
    is_filled,
    percent_of,
)

__all__ = [
    "PROFILE_COMPLETENESS_FIELDS",
    "calculate_profile_completeness",
    "is_filled",
    "percent_of",
]
