"""Settings router: read, update by dotted path, history and reset."""

import logging
from typing import Any

from fastapi import APIRouter, Query

from profilehub.application.services.settings_service import DEFAULT_HISTORY_LIMIT
from profilehub.domain.shared.serialization import to_primitive
from profilehub.presentation.api.dependencies import CurrentAccount, Services
from profilehub.presentation.api.schemas.settings import (
    BulkSettingsUpdateRequest,
    SettingChangeResponse,
    SettingUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Get the settings of the current account")
async def get_settings(
    account: CurrentAccount,
    services: Services,
) -> dict[str, Any]:
    settings = await services.settings.get_or_create_defaults(account.id)
    data = to_primitive(settings)
    data.pop("change_history", None)
    return data


@router.patch("", summary="Update several settings at once")
async def update_settings(
    request: BulkSettingsUpdateRequest,
    account: CurrentAccount,
    services: Services,
) -> list[SettingChangeResponse]:
    changes = await services.settings.update_settings(
        account.id, request.changes, actor=str(account.id)
    )
    return [SettingChangeResponse.from_change(c) for c in changes]


@router.get("/history", summary="Get the change history, newest first")
async def get_history(
    account: CurrentAccount,
    services: Services,
    limit: int = Query(default=DEFAULT_HISTORY_LIMIT, ge=1, le=500),
) -> list[SettingChangeResponse]:
    history = await services.settings.get_history(account.id, limit)
    return [SettingChangeResponse.from_change(c) for c in history]


@router.post("/reset", summary="Restore default settings")
async def reset_settings(
    account: CurrentAccount,
    services: Services,
) -> list[SettingChangeResponse]:
    changes = await services.settings.reset(account.id, actor=str(account.id))
    return [SettingChangeResponse.from_change(c) for c in changes]


@router.patch("/{path}", summary="Update one setting by dotted path")
async def update_setting(
    path: str,
    request: SettingUpdateRequest,
    account: CurrentAccount,
    services: Services,
) -> SettingChangeResponse:
    """Set a single leaf value, e.g. ``PATCH /settings/appearance.theme``."""
    change = await services.settings.update_setting(
        account.id, path, request.value, actor=str(account.id)
    )
    return SettingChangeResponse.from_change(change)
