"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

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
from profilehub.domain.shared.time import ensure_tz_aware
from profilehub.infrastructure.persistence.sqlalchemy.models import AccountModel

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface.

    Every operation runs in its own short-lived session and commits on
    success.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create(self, account: Account) -> Account:
        async with self._session_maker() as session:
            existing = await self._find_model_by_email(session, account.email)
            if existing is not None:
                raise EmailAlreadyExistsError(account.email)

            session.add(self._map_to_model(account))
            try:
                await session.commit()
            except IntegrityError as e:
                if "unique" in str(e).lower():
                    raise EmailAlreadyExistsError(account.email) from e
                raise

        logger.info("Created account: %s (email: %s)", account.id, account.email)
        return account

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        async with self._session_maker() as session:
            model = await session.get(AccountModel, account_id)
            return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[Account]:
        async with self._session_maker() as session:
            model = await self._find_model_by_email(session, email)
            return self._map_to_domain(model) if model else None

    async def update(self, account: Account) -> Account:
        async with self._session_maker() as session:
            model = await session.get(AccountModel, account.id)
            if model is None:
                raise AccountNotFoundError(account.id)

            self._update_model(model, account)
            try:
                await session.commit()
            except IntegrityError as e:
                raise EmailAlreadyExistsError(account.email) from e

        logger.debug("Updated account: %s", account.id)
        return account

    async def delete(self, account_id: UUID) -> Account:
        async with self._session_maker() as session:
            model = await session.get(AccountModel, account_id)
            if model is None:
                raise AccountNotFoundError(account_id)

            account = self._map_to_domain(model)
            await session.delete(model)
            await session.commit()

        logger.info("Deleted account: %s", account_id)
        return account

    async def stats(self) -> AccountStats:
        stmt = select(AccountModel.status, AccountModel.role, func.count()).group_by(
            AccountModel.status,
            AccountModel.role,
        )
        async with self._session_maker() as session:
            rows = (await session.execute(stmt)).all()

        total = active = admins = 0
        for status, role, count in rows:
            total += count
            if status == AccountStatus.ACTIVE.value:
                active += count
            if role == AccountRole.ADMIN.value:
                admins += count

        return AccountStats(
            total=total,
            active=active,
            inactive=total - active,
            admins=admins,
            regular=total - admins,
        )

    async def count(self) -> int:
        async with self._session_maker() as session:
            result = await session.execute(select(func.count(AccountModel.id)))
            return result.scalar_one()

    async def list_all(self) -> list[Account]:
        stmt = select(AccountModel).order_by(AccountModel.created_at.desc())
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_email(
        self,
        session: AsyncSession,
        email: Union[str, Email],
    ) -> Optional[AccountModel]:
        stmt = select(AccountModel).where(AccountModel.email == email_key(email))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            phone_number=model.phone_number,
            role=model.role,
            status=model.status,
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            phone_number=account.phone_number,
            role=account.role.value,
            status=account.status.value,
            last_login_at=account.last_login_at,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def _update_model(self, model: AccountModel, account: Account) -> None:
        model.name = account.name
        model.email = account.email
        model.password_hash = account.password_hash
        model.phone_number = account.phone_number
        model.role = account.role.value
        model.status = account.status.value
        model.last_login_at = account.last_login_at
        model.updated_at = account.updated_at
