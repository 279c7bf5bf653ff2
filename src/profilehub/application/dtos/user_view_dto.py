"""DTOs returned by the aggregation service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

from profilehub.domain.account import AccountStats
from profilehub.domain.shared.exceptions import PartialCascadeFailure
from profilehub.domain.shared.serialization import to_primitive

if TYPE_CHECKING:
    from profilehub.domain.account import Account
    from profilehub.domain.files import FileRecord, FileStats
    from profilehub.domain.profile import Profile
    from profilehub.domain.settings import UserSettings


@dataclass(frozen=True)
class AccountDTO:
    """Account data safe to hand out: the password hash is never copied."""

    id: UUID
    name: str
    email: str
    phone_number: str | None
    role: str
    status: str
    last_login_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> AccountDTO:
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            phone_number=account.phone_number,
            role=account.role.value,
            status=account.status.value,
            last_login_at=account.last_login_at,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return to_primitive(self)


@dataclass(frozen=True)
class CompleteUserView:
    """Everything stored about one account, composed in a single object."""

    account: AccountDTO
    profile: Profile
    settings: UserSettings
    files: list[FileRecord]
    file_stats: FileStats
    overall_completeness: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "account": self.account.to_dict(),
            "profile": to_primitive(self.profile),
            "settings": to_primitive(self.settings),
            "files": [to_primitive(f) for f in self.files],
            "file_stats": to_primitive(self.file_stats),
            "overall_completeness": self.overall_completeness,
        }


class CascadeStep(str, Enum):
    ACCOUNT = "account"
    PROFILE = "profile"
    SETTINGS = "settings"
    FILES = "files"


@dataclass(frozen=True)
class CascadeResult:
    """Outcome of a best-effort cascade delete.

    ``deleted`` maps each step that ran without error to whether it found
    something to remove. Steps that raised appear in ``failure`` instead.
    """

    account_id: UUID
    deleted: dict[CascadeStep, bool] = field(default_factory=dict)
    files_deleted: int = 0
    failure: PartialCascadeFailure | None = None

    @property
    def is_complete(self) -> bool:
        return self.failure is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": str(self.account_id),
            "deleted": {step.value: found for step, found in self.deleted.items()},
            "files_deleted": self.files_deleted,
            "complete": self.is_complete,
            "failed_steps": self.failure.failed_steps if self.failure else {},
        }


class SnapshotFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


@dataclass(frozen=True)
class Snapshot:
    """Serialized export of a complete user view."""

    account_id: UUID
    format: SnapshotFormat
    content: str

    @property
    def media_type(self) -> str:
        if self.format == SnapshotFormat.CSV:
            return "text/csv"
        return "application/json"

    @property
    def filename(self) -> str:
        return f"profilehub-export-{self.account_id}.{self.format.value}"


@dataclass(frozen=True)
class SystemStats:
    accounts: AccountStats
    total_profiles: int
    total_files: int

    def to_dict(self) -> dict[str, Any]:
        return to_primitive(self)
