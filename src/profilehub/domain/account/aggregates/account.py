"""Account aggregate: identity, credentials and access state."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from profilehub.domain.account.value_objects import AccountRole, AccountStatus, Email
from profilehub.domain.shared.exceptions import ValidationError
from profilehub.domain.shared.time import utc_now


class Account:
    """
    Account aggregate root.

    Holds identity (name, email, phone), the stored password hash, role and
    status. Profile, settings and files are separate aggregates keyed by
    the account id.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        phone_number: str | None = None,
        role: Union[str, AccountRole] = AccountRole.USER,
        status: Union[str, AccountStatus] = AccountStatus.ACTIVE,
        last_login_at: datetime | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = self._clean_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._phone_number = self._clean_phone(phone_number)
        self._role = role if isinstance(role, AccountRole) else AccountRole(role)
        self._status = (
            status if isinstance(status, AccountStatus) else AccountStatus(status)
        )
        self._last_login_at = last_login_at
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            msg = "Name cannot be empty"
            raise ValidationError(msg, details={"field": "name"})
        return cleaned

    @staticmethod
    def _clean_phone(phone_number: str | None) -> str | None:
        if phone_number is None:
            return None
        return phone_number.strip() or None

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def role(self) -> AccountRole:
        return self._role

    @property
    def status(self) -> AccountStatus:
        return self._status

    @property
    def is_admin(self) -> bool:
        return self._role == AccountRole.ADMIN

    @property
    def is_active(self) -> bool:
        return self._status == AccountStatus.ACTIVE

    @property
    def last_login_at(self) -> datetime | None:
        return self._last_login_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def set_status(self, status: Union[str, AccountStatus]) -> None:
        self._status = (
            status if isinstance(status, AccountStatus) else AccountStatus(status)
        )
        self._touch()

    def set_role(self, role: Union[str, AccountRole]) -> None:
        self._role = role if isinstance(role, AccountRole) else AccountRole(role)
        self._touch()

    def record_login(self, at: datetime | None = None) -> None:
        self._last_login_at = at or utc_now()
        self._touch()

    def update_details(
        self,
        name: str | None = None,
        phone_number: str | None = None,
    ) -> None:
        if name is not None:
            self._name = self._clean_name(name)
        if phone_number is not None:
            self._phone_number = self._clean_phone(phone_number)
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        phone_number: str | None = None,
        role: AccountRole = AccountRole.USER,
    ) -> "Account":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            phone_number=phone_number,
            role=role,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        phone_number: str | None,
        role: Union[str, AccountRole],
        status: Union[str, AccountStatus],
        last_login_at: datetime | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Account":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            phone_number=phone_number,
            role=role,
            status=status,
            last_login_at=last_login_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def copy(self) -> "Account":
        return Account.reconstitute(
            id=self._id,
            name=self._name,
            email=self._email,
            password_hash=self._password_hash,
            phone_number=self._phone_number,
            role=self._role,
            status=self._status,
            last_login_at=self._last_login_at,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Account(id={self._id}, email={self._email.value})"
