"""Profile domain exceptions."""

from profilehub.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ProfileNotFoundError(EntityNotFoundError):
    """No profile exists for the account."""

    def __init__(self, account_id: object) -> None:
        self.account_id = account_id
        super().__init__(
            f"Profile not found for account: {account_id}",
            ErrorCode.PROFILE_NOT_FOUND,
            {"account_id": str(account_id)},
        )
