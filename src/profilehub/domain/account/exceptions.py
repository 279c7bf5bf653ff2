"""Account domain exceptions."""

from profilehub.domain.shared.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """An email that cannot identify an account."""

    def __init__(self, message: str, email: str | None = None) -> None:
        self.email = email
        super().__init__(
            message, ErrorCode.INVALID_EMAIL, {"field": "email", "value": email}
        )


class EmailAlreadyExistsError(DuplicateKeyError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )


class AccountNotFoundError(EntityNotFoundError):
    """Account not found."""

    def __init__(self, account_id: object) -> None:
        self.account_id = account_id
        super().__init__(
            f"Account not found: {account_id}",
            ErrorCode.ACCOUNT_NOT_FOUND,
            {"account_id": str(account_id)},
        )


class CannotDeleteSelfError(ValidationError):
    """Cannot delete your own account through the admin console."""

    def __init__(self) -> None:
        super().__init__("Cannot delete your own account")


class CannotDemoteSelfError(ValidationError):
    """Cannot demote yourself from admin."""

    def __init__(self) -> None:
        super().__init__("Cannot demote yourself from admin")
