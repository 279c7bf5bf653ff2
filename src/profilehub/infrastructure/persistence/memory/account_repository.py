"""In-memory implementation of AccountRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from profilehub.domain.account import (
    Account,
    AccountNotFoundError,
    AccountRepository,
    AccountRole,
    AccountStats,
    AccountStatus,
    Email,
    EmailAlreadyExistsError,
    email_key,
)
from profilehub.domain.shared.time import utc_now

logger = logging.getLogger(__name__)


class AccountRepositoryMemory(AccountRepository):
    """Dict-backed account store.

    Accounts are copied on the way in and out, so callers never share
    state with the store.
    """

    def __init__(self) -> None:
        self._accounts: dict[UUID, Account] = {}
        self._ids_by_email: dict[str, UUID] = {}

    async def create(self, account: Account) -> Account:
        key = email_key(account.email)
        if key in self._ids_by_email:
            raise EmailAlreadyExistsError(account.email)

        self._accounts[account.id] = account.copy()
        self._ids_by_email[key] = account.id
        logger.info("Created account: %s (email: %s)", account.id, account.email)
        return account

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return account.copy() if account else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        account_id = self._ids_by_email.get(email_key(email))
        if account_id is None:
            return None
        return await self.find_by_id(account_id)

    async def update(self, account: Account) -> Account:
        stored = self._accounts.get(account.id)
        if stored is None:
            raise AccountNotFoundError(account.id)

        new_key = email_key(account.email)
        owner = self._ids_by_email.get(new_key)
        if owner is not None and owner != account.id:
            raise EmailAlreadyExistsError(account.email)

        del self._ids_by_email[email_key(stored.email)]
        self._ids_by_email[new_key] = account.id
        self._accounts[account.id] = account.copy()
        logger.debug("Updated account: %s", account.id)
        return account

    async def delete(self, account_id: UUID) -> Account:
        account = self._accounts.pop(account_id, None)
        if account is None:
            raise AccountNotFoundError(account_id)

        self._ids_by_email.pop(email_key(account.email), None)
        logger.info("Deleted account: %s", account_id)
        return account

    async def stats(self) -> AccountStats:
        accounts = list(self._accounts.values())
        active = sum(1 for a in accounts if a.status == AccountStatus.ACTIVE)
        admins = sum(1 for a in accounts if a.role == AccountRole.ADMIN)
        return AccountStats(
            total=len(accounts),
            active=active,
            inactive=len(accounts) - active,
            admins=admins,
            regular=len(accounts) - admins,
        )

    async def count(self) -> int:
        return len(self._accounts)

    async def list_all(self) -> list[Account]:
        ordered = sorted(
            self._accounts.values(),
            key=lambda a: a.created_at or utc_now(),
            reverse=True,
        )
        return [a.copy() for a in ordered]
