from enum import Enum


class AccountRole(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"
