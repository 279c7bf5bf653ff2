from enum import Enum


class AccountStatus(str, Enum):
    """Whether an account may log in."""

    ACTIVE = "active"
    INACTIVE = "inactive"
