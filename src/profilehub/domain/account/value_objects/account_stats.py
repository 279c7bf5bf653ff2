"""Account statistics value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountStats:
    """Account counts grouped by status and by role."""

    total: int = 0
    active: int = 0
    inactive: int = 0
    admins: int = 0
    regular: int = 0
