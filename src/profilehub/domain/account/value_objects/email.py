"""Account email addresses.

An account is identified by its email, compared case-insensitively. The
stored form is trimmed and lowercased once, here, so repositories can
use it directly as a unique lookup key.
"""

import re
from dataclasses import dataclass
from typing import Union

from profilehub.domain.account.exceptions import InvalidEmailError

# local@domain.tld; deliverability is not checked
_ADDRESS = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """A normalized account email (``"  Ada@X.org"`` becomes ``"ada@x.org"``)."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg, self.value)
        if not _ADDRESS.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg, self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


def email_key(email: Union[str, Email]) -> str:
    """Lookup key for a stored or user-typed email, without validating it."""
    if isinstance(email, Email):
        return email.value
    return email.strip().lower()
