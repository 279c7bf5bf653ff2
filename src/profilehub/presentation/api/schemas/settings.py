"""Settings schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from profilehub.domain.settings import SettingChange


class SettingUpdateRequest(BaseModel):
    """New value for a single setting addressed by its dotted path."""

    value: Any = Field(..., description="New leaf value")

    model_config = ConfigDict(
        json_schema_extra={"example": {"value": "dark"}},
    )


class BulkSettingsUpdateRequest(BaseModel):
    """Several leaf updates, applied all or nothing."""

    changes: dict[str, Any] = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "changes": {
                    "appearance.theme": "dark",
                    "general.timezone": "Europe/Berlin",
                },
            },
        },
    )


class SettingChangeResponse(BaseModel):
    id: UUID
    setting_path: str
    old_value: Any
    new_value: Any
    changed_by: str
    changed_at: datetime

    @classmethod
    def from_change(cls, change: SettingChange) -> SettingChangeResponse:
        return cls(
            id=change.id,
            setting_path=change.setting_path,
            old_value=change.old_value,
            new_value=change.new_value,
            changed_by=change.changed_by,
            changed_at=change.changed_at,
        )
