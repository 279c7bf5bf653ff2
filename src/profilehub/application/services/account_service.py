"""Account service: registration, login and administration of accounts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from profilehub.domain.account import (
    Account,
    AccountNotFoundError,
    AccountRole,
    AccountStats,
    AccountStatus,
    CannotDemoteSelfError,
    Email,
    EmailAlreadyExistsError,
)
from profilehub.domain.profile import Profile
from profilehub_auth import (
    AccountInactiveError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    PermissionDeniedError,
)

if TYPE_CHECKING:
    from profilehub.application.factories import RepositoryFactory
    from profilehub.domain.account import AccountRepository
    from profilehub.domain.profile import ProfileRepository
    from profilehub.domain.settings import UserSettingsRepository

logger = logging.getLogger(__name__)


class AccountService:
    """
    Application service for the credential store.

    Orchestrates profilehub_auth (password hashing, JWT tokens) with the
    Account aggregate to provide:
    - Registration (account plus default profile and settings)
    - Login with password
    - Token verification
    - Admin-only role and status changes
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        profile_repository: ProfileRepository,
        settings_repository: UserSettingsRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._profile_repo = profile_repository
        self._settings_repo = settings_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ) -> AccountService:
        return cls(
            account_repository=factory.account_repository(),
            profile_repository=factory.profile_repository(),
            settings_repository=factory.settings_repository(),
            password_service=password_service,
            jwt_service=jwt_service,
        )

    async def create_account(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        phone_number: str | None = None,
        role: AccountRole = AccountRole.USER,
    ) -> Account:
        normalized = Email(email)
        if await self._account_repo.exists_by_email(normalized):
            raise EmailAlreadyExistsError(normalized.value)

        password_hash = self._password_service.hash(password)
        account = Account.create(
            name=name,
            email=normalized,
            password_hash=password_hash,
            phone_number=phone_number,
            role=role,
        )
        await self._account_repo.create(account)

        profile = Profile.default(account.id)
        profile.recalculate_completeness()
        await self._profile_repo.save(profile)
        await self._settings_repo.get_or_create(account.id)

        logger.info("Account created: %s (role: %s)", account.email, role.value)
        return account

    async def authenticate(self, email: str, password: str) -> tuple[Account, str]:
        """Verify credentials and issue an access token."""
        account = await self._account_repo.find_by_email(email)
        if account is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, account.password_hash):
            raise InvalidCredentialsError

        if not account.is_active:
            raise AccountInactiveError

        account.record_login()
        await self._account_repo.update(account)

        token = self._jwt_service.create_access_token(
            account_id=account.id,
            email=account.email,
            role=account.role.value,
        )
        logger.info("Account logged in: %s", account.email)
        return account, token

    async def resolve_token(self, token: str) -> Account:
        """Return the active account a token was issued to."""
        payload = self._jwt_service.verify_token(token)
        account = await self._account_repo.find_by_id(payload.account_id)
        if account is None:
            msg = "Account not found"
            raise InvalidTokenError(msg)
        if not account.is_active:
            raise AccountInactiveError
        return account

    async def get_account(self, account_id: UUID) -> Account:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def find_by_email(self, email: str) -> Account | None:
        return await self._account_repo.find_by_email(email)

    async def update_status(
        self,
        account_id: UUID,
        status: Union[str, AccountStatus],
    ) -> Account:
        account = await self.get_account(account_id)
        account.set_status(status)
        await self._account_repo.update(account)
        logger.info("Account %s status set to %s", account_id, account.status.value)
        return account

    async def set_status(
        self,
        actor: Account,
        account_id: UUID,
        status: Union[str, AccountStatus],
    ) -> Account:
        self._require_admin(actor)
        return await self.update_status(account_id, status)

    async def change_role(
        self,
        actor: Account,
        account_id: UUID,
        role: Union[str, AccountRole],
    ) -> Account:
        self._require_admin(actor)
        new_role = role if isinstance(role, AccountRole) else AccountRole(role)
        if actor.id == account_id and new_role != AccountRole.ADMIN:
            raise CannotDemoteSelfError

        account = await self.get_account(account_id)
        account.set_role(new_role)
        await self._account_repo.update(account)
        logger.info("Account %s role set to %s", account_id, new_role.value)
        return account

    async def record_login(self, account_id: UUID) -> Account:
        account = await self.get_account(account_id)
        account.record_login()
        return await self._account_repo.update(account)

    async def update_details(
        self,
        account_id: UUID,
        name: str | None = None,
        phone_number: str | None = None,
    ) -> Account:
        account = await self.get_account(account_id)
        account.update_details(name=name, phone_number=phone_number)
        await self._account_repo.update(account)
        logger.debug("Account details updated: %s", account_id)
        return account

    async def change_password(
        self,
        account_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        account = await self.get_account(account_id)
        if not self._password_service.verify(current_password, account.password_hash):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        account.change_password_hash(self._password_service.hash(new_password))
        await self._account_repo.update(account)
        logger.info("Password changed for account: %s", account_id)

    async def delete(self, account_id: UUID) -> Account:
        """Delete the credential record only; see UserDataService for cascade."""
        account = await self._account_repo.delete(account_id)
        logger.info("Account deleted: %s", account.email)
        return account

    async def list_accounts(self) -> list[Account]:
        return await self._account_repo.list_all()

    async def stats(self) -> AccountStats:
        return await self._account_repo.stats()

    async def ensure_initial_admin(
        self,
        email: str,
        name: str,
        password: str,
    ) -> Account | None:
        """Create the configured administrator unless the email is taken.

        Returns the new account, or None if nothing was created.
        """
        existing = await self._account_repo.find_by_email(email)
        if existing is not None:
            logger.debug("Initial admin already present: %s", existing.email)
            return None

        return await self.create_account(
            name=name,
            email=email,
            password=password,
            role=AccountRole.ADMIN,
        )

    @staticmethod
    def _require_admin(actor: Account) -> None:
        if not actor.is_admin:
            raise PermissionDeniedError
