"""Profile schemas."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from profilehub.application.dtos import CompleteUserView
from profilehub.domain.shared.serialization import to_primitive
from profilehub.presentation.api.schemas.auth import AccountResponse
from profilehub.presentation.api.schemas.files import (
    FileRecordResponse,
    FileStatsResponse,
)


class ProfileUpdateRequest(BaseModel):
    """Partial profile update.

    Nested groups are merged field by field, so sending only
    ``location.city`` keeps the stored country.
    """

    bio: str | None = Field(default=None, max_length=500)
    date_of_birth: date | None = None
    gender: str | None = None
    location: dict[str, Any] | None = None
    social_links: dict[str, Any] | None = None
    emergency_contact: dict[str, Any] | None = None
    privacy: dict[str, Any] | None = None
    notification_prefs: dict[str, Any] | None = None
    custom_fields: dict[str, Any] | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "bio": "Mathematician",
                "location": {"city": "London", "country": "UK"},
            },
        },
    )

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)


class UserViewResponse(BaseModel):
    """Account, profile, settings and files of one account."""

    account: AccountResponse
    profile: dict[str, Any]
    settings: dict[str, Any]
    files: list[FileRecordResponse]
    file_stats: FileStatsResponse
    overall_completeness: int = Field(..., ge=0, le=100)

    @classmethod
    def from_view(cls, view: CompleteUserView) -> UserViewResponse:
        account = view.account
        return cls(
            account=AccountResponse(
                id=account.id,
                name=account.name,
                email=account.email,
                phone_number=account.phone_number,
                role=account.role,
                status=account.status,
                last_login_at=account.last_login_at,
                created_at=account.created_at,
            ),
            profile=to_primitive(view.profile),
            settings=to_primitive(view.settings),
            files=[FileRecordResponse.from_record(f) for f in view.files],
            file_stats=FileStatsResponse.from_stats(view.file_stats),
            overall_completeness=view.overall_completeness,
        )


class ViewCountResponse(BaseModel):
    view_count: int
