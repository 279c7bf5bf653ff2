"""File record schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from profilehub.domain.files import FileRecord, FileStats, Permission


class FileRecordResponse(BaseModel):
    """File metadata as exposed to clients (no server paths)."""

    id: UUID
    owner_id: UUID
    filename: str
    original_name: str
    mime_type: str
    size_bytes: int
    category: str
    storage_backend: str
    public_url: str | None
    tags: list[str]
    is_public: bool
    download_count: int
    version: int
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: FileRecord) -> FileRecordResponse:
        return cls(
            id=record.id,
            owner_id=record.owner_id,
            filename=record.filename,
            original_name=record.original_name,
            mime_type=record.mime_type,
            size_bytes=record.size_bytes,
            category=record.category.value,
            storage_backend=record.storage_backend.value,
            public_url=record.public_url,
            tags=list(record.tags),
            is_public=record.is_public,
            download_count=record.download_count,
            version=record.version,
            expires_at=record.expires_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class CategoryStatsResponse(BaseModel):
    category: str
    count: int
    total_size_bytes: int


class FileStatsResponse(BaseModel):
    total_files: int
    total_size_bytes: int
    by_category: list[CategoryStatsResponse]

    @classmethod
    def from_stats(cls, stats: FileStats) -> FileStatsResponse:
        return cls(
            total_files=stats.total_files,
            total_size_bytes=stats.total_size_bytes,
            by_category=[
                CategoryStatsResponse(
                    category=c.category.value,
                    count=c.count,
                    total_size_bytes=c.total_size_bytes,
                )
                for c in stats.by_category
            ],
        )


class GrantAccessRequest(BaseModel):
    principal_id: UUID
    permission: Permission = Permission.VIEW
