"""Profile router: the complete user view and profile updates."""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, File, UploadFile

from profilehub.domain.files import FileCategory
from profilehub.domain.profile import MediaReference
from profilehub.domain.shared.serialization import to_primitive
from profilehub.presentation.api.dependencies import CurrentAccount, Services
from profilehub.presentation.api.schemas.profile import (
    ProfileUpdateRequest,
    UserViewResponse,
    ViewCountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_MIME_TYPE = "application/octet-stream"


@router.get("", summary="Get everything stored about the current account")
async def get_complete_view(
    account: CurrentAccount,
    services: Services,
) -> UserViewResponse:
    view = await services.user_data.get_complete_user_view(account.id)
    return UserViewResponse.from_view(view)


@router.patch("", summary="Partially update the profile")
async def update_profile(
    request: ProfileUpdateRequest,
    account: CurrentAccount,
    services: Services,
) -> dict[str, Any]:
    profile = await services.profiles.update(account.id, request.changes())
    return to_primitive(profile)


@router.post("/picture", summary="Upload a new profile picture")
async def upload_profile_picture(
    account: CurrentAccount,
    services: Services,
    file: UploadFile = File(...),
) -> dict[str, Any]:
    reference = await _upload_image(
        services, account.id, file, FileCategory.PROFILE_PICTURE
    )
    profile = await services.profiles.set_profile_picture(account.id, reference)
    return to_primitive(profile)


@router.post("/cover", summary="Upload a new cover photo")
async def upload_cover_photo(
    account: CurrentAccount,
    services: Services,
    file: UploadFile = File(...),
) -> dict[str, Any]:
    reference = await _upload_image(
        services, account.id, file, FileCategory.COVER_PHOTO
    )
    profile = await services.profiles.set_cover_photo(account.id, reference)
    return to_primitive(profile)


@router.post("/{account_id}/views", summary="Count a view of a profile")
async def record_view(
    account_id: UUID,
    _viewer: CurrentAccount,
    services: Services,
) -> ViewCountResponse:
    count = await services.profiles.increment_views(account_id)
    return ViewCountResponse(view_count=count)


async def _upload_image(
    services: Services,
    account_id: UUID,
    file: UploadFile,
    category: FileCategory,
) -> MediaReference:
    content = await file.read()
    record = await services.files.upload(
        owner_id=account_id,
        content=content,
        original_name=file.filename or "",
        mime_type=file.content_type or DEFAULT_MIME_TYPE,
        category=category,
        is_public=True,
    )
    return MediaReference(
        file_id=record.id,
        url=record.public_url,
        uploaded_at=record.created_at,
    )
