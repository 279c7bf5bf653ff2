"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    account_id
        The unique identifier of the account
    email
        The account's email address
    role
        The account role at the time the token was issued
    exp
        Token expiration timestamp
    """

    account_id: UUID
    email: str
    role: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_admin(self) -> bool:
        return self.role == "admin"
