"""Account domain: identity and credentials of users and admins.

Profile, settings and files reference an account only by its id.
"""

from profilehub.domain.account.aggregates import Account
from profilehub.domain.account.exceptions import (
    AccountNotFoundError,
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from profilehub.domain.account.repositories import AccountRepository
from profilehub.domain.account.value_objects import (
    AccountRole,
    AccountStats,
    AccountStatus,
    Email,
    email_key,
)

__all__ = [
    "Account",
    "AccountNotFoundError",
    "AccountRepository",
    "AccountRole",
    "AccountStats",
    "AccountStatus",
    "CannotDeleteSelfError",
    "CannotDemoteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "email_key",
]
