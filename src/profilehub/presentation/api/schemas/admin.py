"""Admin schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from profilehub.application.dtos import CascadeResult, SystemStats
from profilehub.domain.account import AccountRole, AccountStatus


class AccountStatsResponse(BaseModel):
    total: int
    active: int
    inactive: int
    admins: int
    regular: int


class SystemStatsResponse(BaseModel):
    accounts: AccountStatsResponse
    total_profiles: int
    total_files: int

    @classmethod
    def from_stats(cls, stats: SystemStats) -> SystemStatsResponse:
        accounts = stats.accounts
        return cls(
            accounts=AccountStatsResponse(
                total=accounts.total,
                active=accounts.active,
                inactive=accounts.inactive,
                admins=accounts.admins,
                regular=accounts.regular,
            ),
            total_profiles=stats.total_profiles,
            total_files=stats.total_files,
        )


class UpdateStatusRequest(BaseModel):
    status: AccountStatus


class UpdateRoleRequest(BaseModel):
    role: AccountRole


class CascadeResultResponse(BaseModel):
    """Outcome of deleting an account and everything it owns.

    ``complete`` is False when at least one step failed; the failed
    steps and their errors are listed in ``failed_steps``.
    """

    account_id: UUID
    deleted: dict[str, bool]
    files_deleted: int
    complete: bool
    failed_steps: dict[str, str]

    @classmethod
    def from_result(cls, result: CascadeResult) -> CascadeResultResponse:
        return cls.model_validate(result.to_dict())
