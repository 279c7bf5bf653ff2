from profilehub.domain.account.value_objects.account_role import AccountRole
from profilehub.domain.account.value_objects.account_stats import AccountStats
from profilehub.domain.account.value_objects.account_status import AccountStatus
from profilehub.domain.account.value_objects.email import Email, email_key

__all__ = [
    "AccountRole",
    "AccountStats",
    "AccountStatus",
    "Email",
    "email_key",
]
