"""Settings domain exceptions."""

from profilehub.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class SettingsNotFoundError(EntityNotFoundError):
    """No settings row exists for the account."""

    def __init__(self, account_id: object) -> None:
        self.account_id = account_id
        super().__init__(
            f"Settings not found for account: {account_id}",
            ErrorCode.SETTINGS_NOT_FOUND,
            {"account_id": str(account_id)},
        )
