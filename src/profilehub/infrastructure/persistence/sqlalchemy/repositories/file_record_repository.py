"""SQLAlchemy implementation of FileRecordRepository."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from profilehub.domain.files import (
    AccessGrant,
    CategoryStats,
    FileCategory,
    FileRecord,
    FileRecordRepository,
    FileStats,
    FileVersion,
    ImageMetadata,
    Permission,
    ProcessingStatus,
    StorageBackend,
)
from profilehub.domain.shared.serialization import build_dataclass, to_primitive
from profilehub.domain.shared.time import ensure_tz_aware
from profilehub.infrastructure.persistence.sqlalchemy.models import FileRecordModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    return ensure_tz_aware(value) if value is not None else None


class FileRecordRepositorySQLAlchemy(FileRecordRepository):
    """SQLAlchemy implementation of FileRecordRepository."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def save(self, record: FileRecord) -> FileRecord:
        async with self._session_maker() as session:
            model = await session.get(FileRecordModel, record.id)
            if model is None:
                model = FileRecordModel(id=record.id)
                session.add(model)
            self._update_model(model, record)
            await session.commit()
        return record

    async def find_by_id(self, file_id: UUID) -> Optional[FileRecord]:
        async with self._session_maker() as session:
            model = await session.get(FileRecordModel, file_id)
            return self._map_to_domain(model) if model else None

    async def list_by_owner(
        self,
        owner_id: UUID,
        category: FileCategory | None = None,
    ) -> list[FileRecord]:
        stmt = select(FileRecordModel).where(FileRecordModel.owner_id == owner_id)
        if category is not None:
            stmt = stmt.where(FileRecordModel.category == category.value)
        stmt = stmt.order_by(FileRecordModel.created_at.desc())

        async with self._session_maker() as session:
            result = await session.execute(stmt)
            return [self._map_to_domain(m) for m in result.scalars().all()]

    async def stats_by_owner(self, owner_id: UUID) -> FileStats:
        stmt = (
            select(
                FileRecordModel.category,
                func.count(FileRecordModel.id),
                func.coalesce(func.sum(FileRecordModel.size_bytes), 0),
            )
            .where(FileRecordModel.owner_id == owner_id)
            .group_by(FileRecordModel.category)
        )
        async with self._session_maker() as session:
            rows = (await session.execute(stmt)).all()

        return FileStats.from_categories(
            [
                CategoryStats(
                    category=FileCategory(category),
                    count=count,
                    total_size_bytes=int(total),
                )
                for category, count, total in rows
            ]
        )

    async def delete(self, file_id: UUID) -> bool:
        stmt = delete(FileRecordModel).where(FileRecordModel.id == file_id)
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def delete_by_owner(self, owner_id: UUID) -> int:
        stmt = delete(FileRecordModel).where(FileRecordModel.owner_id == owner_id)
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount

    async def find_expired(self, now: datetime) -> list[FileRecord]:
        stmt = select(FileRecordModel).where(
            FileRecordModel.expires_at.is_not(None),
            FileRecordModel.expires_at <= now,
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        async with self._session_maker() as session:
            result = await session.execute(select(func.count(FileRecordModel.id)))
            return result.scalar_one()

    def _map_to_domain(self, model: FileRecordModel) -> FileRecord:
        return FileRecord(
            id=model.id,
            owner_id=model.owner_id,
            filename=model.filename,
            original_name=model.original_name,
            mime_type=model.mime_type,
            size_bytes=model.size_bytes,
            encoding=model.encoding,
            storage_backend=StorageBackend(model.storage_backend),
            storage_path=model.storage_path,
            public_url=model.public_url,
            object_key=model.object_key,
            category=FileCategory(model.category),
            tags=list(model.tags or []),
            is_public=model.is_public,
            access_list=[
                AccessGrant(
                    principal_id=UUID(g["principal_id"]),
                    permission=Permission(g["permission"]),
                )
                for g in model.access_list or []
            ],
            image_metadata=(
                build_dataclass(ImageMetadata, model.image_metadata)
                if model.image_metadata
                else None
            ),
            processing_status=ProcessingStatus(model.processing_status),
            download_count=model.download_count,
            last_accessed_at=_aware(model.last_accessed_at),
            version=model.version,
            previous_versions=[
                build_dataclass(FileVersion, v) for v in model.previous_versions or []
            ],
            expires_at=_aware(model.expires_at),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _update_model(self, model: FileRecordModel, record: FileRecord) -> None:
        model.owner_id = record.owner_id
        model.filename = record.filename
        model.original_name = record.original_name
        model.mime_type = record.mime_type
        model.size_bytes = record.size_bytes
        model.encoding = record.encoding
        model.storage_backend = record.storage_backend.value
        model.storage_path = record.storage_path
        model.public_url = record.public_url
        model.object_key = record.object_key
        model.category = record.category.value
        model.tags = list(record.tags)
        model.is_public = record.is_public
        model.access_list = to_primitive(record.access_list)
        model.image_metadata = to_primitive(record.image_metadata)
        model.processing_status = record.processing_status.value
        model.download_count = record.download_count
        model.last_accessed_at = record.last_accessed_at
        model.version = record.version
        model.previous_versions = to_primitive(record.previous_versions)
        model.expires_at = record.expires_at
        model.created_at = record.created_at
        model.updated_at = record.updated_at
