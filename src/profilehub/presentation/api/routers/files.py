"""Files router: uploads, versions, downloads and sharing."""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from profilehub.domain.account import Account
from profilehub.domain.files import FileCategory, FileRecord, FileRecordNotFoundError
from profilehub.presentation.api.dependencies import CurrentAccount, Services
from profilehub.presentation.api.schemas.files import (
    FileRecordResponse,
    FileStatsResponse,
    GrantAccessRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_MIME_TYPE = "application/octet-stream"


@router.get("", summary="List files of the current account, newest first")
async def list_files(
    account: CurrentAccount,
    services: Services,
    category: FileCategory | None = Query(default=None),
) -> list[FileRecordResponse]:
    records = await services.files.list_by_owner(account.id, category)
    return [FileRecordResponse.from_record(r) for r in records]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Upload a file",
    responses={400: {"description": "Empty, too large or disallowed type"}},
)
async def upload_file(  # noqa: PLR0913
    account: CurrentAccount,
    services: Services,
    file: UploadFile = File(...),
    category: FileCategory = Form(default=FileCategory.OTHER),
    tags: str = Form(default="", description="Comma separated tags"),
    is_public: bool = Form(default=False),
    expires_at: datetime | None = Form(default=None),
) -> FileRecordResponse:
    content = await file.read()
    record = await services.files.upload(
        owner_id=account.id,
        content=content,
        original_name=file.filename or "",
        mime_type=file.content_type or DEFAULT_MIME_TYPE,
        category=category,
        tags=[t.strip() for t in tags.split(",") if t.strip()],
        is_public=is_public,
        expires_at=expires_at,
    )
    return FileRecordResponse.from_record(record)


@router.get("/stats", summary="Storage statistics of the current account")
async def get_stats(account: CurrentAccount, services: Services) -> FileStatsResponse:
    stats = await services.files.stats_by_owner(account.id)
    return FileStatsResponse.from_stats(stats)


@router.get("/{file_id}", summary="Get file metadata")
async def get_file(
    file_id: UUID,
    account: CurrentAccount,
    services: Services,
) -> FileRecordResponse:
    record = await _get_accessible(services, file_id, account)
    return FileRecordResponse.from_record(record)


@router.post("/{file_id}/downloads", summary="Record a download")
async def record_download(
    file_id: UUID,
    account: CurrentAccount,
    services: Services,
) -> FileRecordResponse:
    await _get_accessible(services, file_id, account)
    record = await services.files.record_download(file_id)
    return FileRecordResponse.from_record(record)


@router.post("/{file_id}/versions", summary="Upload a new version of a file")
async def upload_new_version(
    file_id: UUID,
    account: CurrentAccount,
    services: Services,
    file: UploadFile = File(...),
) -> FileRecordResponse:
    await _get_owned(services, file_id, account)
    content = await file.read()
    record = await services.files.upload_new_version(
        file_id,
        content=content,
        original_name=file.filename or "",
        mime_type=file.content_type or DEFAULT_MIME_TYPE,
    )
    return FileRecordResponse.from_record(record)


@router.post("/{file_id}/grants", summary="Share a file with another account")
async def grant_access(
    file_id: UUID,
    request: GrantAccessRequest,
    account: CurrentAccount,
    services: Services,
) -> FileRecordResponse:
    await _get_owned(services, file_id, account)
    record = await services.files.grant_access(
        file_id, request.principal_id, request.permission
    )
    return FileRecordResponse.from_record(record)


@router.delete(
    "/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a file and its stored content",
)
async def delete_file(
    file_id: UUID,
    account: CurrentAccount,
    services: Services,
) -> None:
    await _get_owned(services, file_id, account)
    await services.files.delete_file(file_id)


async def _get_accessible(
    services: Services,
    file_id: UUID,
    account: Account,
) -> FileRecord:
    # Files the caller may not see are reported as missing
    record = await services.files.get(file_id)
    if not (account.is_admin or record.can_access(account.id)):
        raise FileRecordNotFoundError(file_id)
    return record


async def _get_owned(services: Services, file_id: UUID, account: Account) -> FileRecord:
    record = await services.files.get(file_id)
    if not (account.is_admin or record.owner_id == account.id):
        raise FileRecordNotFoundError(file_id)
    return record
