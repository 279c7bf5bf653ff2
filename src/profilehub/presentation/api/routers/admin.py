"""Admin router: system statistics and account administration."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, Response

from profilehub.domain.account import CannotDeleteSelfError
from profilehub.presentation.api.dependencies import AdminAccount, Services
from profilehub.presentation.api.routers.exports import snapshot_response
from profilehub.presentation.api.schemas.admin import (
    CascadeResultResponse,
    SystemStatsResponse,
    UpdateRoleRequest,
    UpdateStatusRequest,
)
from profilehub.presentation.api.schemas.auth import AccountResponse
from profilehub.presentation.api.schemas.profile import UserViewResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", summary="Account, profile and file totals")
async def get_system_stats(
    _admin: AdminAccount,
    services: Services,
) -> SystemStatsResponse:
    stats = await services.user_data.get_system_stats()
    return SystemStatsResponse.from_stats(stats)


@router.get("/accounts", summary="List all accounts, newest first")
async def list_accounts(
    _admin: AdminAccount,
    services: Services,
) -> list[AccountResponse]:
    accounts = await services.accounts.list_accounts()
    return [AccountResponse.from_account(a) for a in accounts]


@router.get("/accounts/{account_id}", summary="Complete view of any account")
async def get_account_view(
    account_id: UUID,
    _admin: AdminAccount,
    services: Services,
) -> UserViewResponse:
    view = await services.user_data.get_complete_user_view(account_id)
    return UserViewResponse.from_view(view)


@router.get("/accounts/{account_id}/export", summary="Export any account")
async def export_account(
    account_id: UUID,
    _admin: AdminAccount,
    services: Services,
    format: str = Query(default="json", description="json or csv"),
) -> Response:
    snapshot = await services.user_data.export_snapshot(account_id, format)
    return snapshot_response(snapshot)


@router.patch("/accounts/{account_id}/status", summary="Activate or deactivate")
async def update_status(
    account_id: UUID,
    request: UpdateStatusRequest,
    admin: AdminAccount,
    services: Services,
) -> AccountResponse:
    account = await services.accounts.set_status(admin, account_id, request.status)
    return AccountResponse.from_account(account)


@router.patch("/accounts/{account_id}/role", summary="Change the role")
async def update_role(
    account_id: UUID,
    request: UpdateRoleRequest,
    admin: AdminAccount,
    services: Services,
) -> AccountResponse:
    account = await services.accounts.change_role(admin, account_id, request.role)
    return AccountResponse.from_account(account)


@router.delete(
    "/accounts/{account_id}",
    summary="Delete an account with its profile, settings and files",
)
async def delete_account(
    account_id: UUID,
    admin: AdminAccount,
    services: Services,
) -> CascadeResultResponse:
    """Best effort: the response lists steps that failed instead of erroring."""
    if admin.id == account_id:
        raise CannotDeleteSelfError
    result = await services.user_data.delete_account_cascade(account_id)
    return CascadeResultResponse.from_result(result)
