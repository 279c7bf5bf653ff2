"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from profilehub.domain.account.aggregates.account import Account
from profilehub.domain.account.value_objects import AccountStats, Email


class AccountRepository(ABC):
    """Repository interface for Account aggregates."""

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Persist a new account.

        Raises EmailAlreadyExistsError if the email is taken.
        """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        """Find an account by email (case-insensitive)."""

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Persist changes to an existing account.

        Raises AccountNotFoundError if the account does not exist.
        """

    @abstractmethod
    async def delete(self, account_id: UUID) -> Account:
        """Delete an account and return the deleted record.

        Raises AccountNotFoundError if the account does not exist.
        """

    @abstractmethod
    async def stats(self) -> AccountStats:
        """Count accounts grouped by status and by role."""

    @abstractmethod
    async def count(self) -> int:
        """Count total accounts."""

    @abstractmethod
    async def list_all(self) -> list[Account]:
        """List all accounts, newest first."""

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None
