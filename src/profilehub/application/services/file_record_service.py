"""File record service: uploads, versions and cleanup of stored files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from pathlib import PurePath
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from profilehub.domain.files import (
    FileCategory,
    FileDescriptor,
    FileRecord,
    FileRecordNotFoundError,
    FileStats,
    ImageMetadata,
    InvalidUploadError,
    Permission,
)
from profilehub.domain.shared.exceptions import StorageBackendError
from profilehub.domain.shared.time import utc_now

if TYPE_CHECKING:
    from profilehub.application.factories import RepositoryFactory
    from profilehub.application.ports import BlobStorage, ObjectStorageClient
    from profilehub.domain.files import FileRecordRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class FileRecordService:
    """
    Application service for file records.

    Uploads are a two-step pipeline: the content is written to the local
    blob storage first (authoritative), then optionally mirrored to an
    object storage client. A failed mirror is logged as a
    StorageBackendError and the record stays ``local``.
    """

    def __init__(  # noqa: PLR0913
        self,
        file_repository: FileRecordRepository,
        blob_storage: BlobStorage,
        object_storage: ObjectStorageClient | None = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        allowed_mime_prefixes: Iterable[str] = ("image/",),
    ):
        self._file_repo = file_repository
        self._blob_storage = blob_storage
        self._object_storage = object_storage
        self._max_upload_bytes = max_upload_bytes
        self._allowed_mime_prefixes = tuple(allowed_mime_prefixes)

    @classmethod
    def from_factory(  # noqa: PLR0913
        cls,
        factory: RepositoryFactory,
        blob_storage: BlobStorage,
        object_storage: ObjectStorageClient | None = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        allowed_mime_prefixes: Iterable[str] = ("image/",),
    ) -> FileRecordService:
        return cls(
            file_repository=factory.file_repository(),
            blob_storage=blob_storage,
            object_storage=object_storage,
            max_upload_bytes=max_upload_bytes,
            allowed_mime_prefixes=allowed_mime_prefixes,
        )

    async def save(self, owner_id: UUID, descriptor: FileDescriptor) -> FileRecord:
        """Record an already stored blob as a new file (version 1)."""
        record = FileRecord.create(owner_id, descriptor)
        await self._file_repo.save(record)
        logger.info(
            "File record created: %s (%s, %d bytes)",
            record.id,
            record.category.value,
            record.size_bytes,
        )
        return record

    async def upload(  # noqa: PLR0913
        self,
        owner_id: UUID,
        content: bytes,
        original_name: str,
        mime_type: str,
        category: FileCategory = FileCategory.OTHER,
        tags: Iterable[str] = (),
        is_public: bool = False,
        expires_at: datetime | None = None,
        image_metadata: ImageMetadata | None = None,
    ) -> FileRecord:
        """Store uploaded content and create its file record."""
        self._validate_upload(content, mime_type)

        key, descriptor = await self._store(owner_id, content, original_name, mime_type)
        record = FileRecord.create(
            owner_id,
            replace(
                descriptor,
                category=category,
                tags=tuple(tags),
                is_public=is_public,
                image_metadata=image_metadata,
                expires_at=expires_at,
            ),
        )
        await self._mirror(record, key, content)
        await self._file_repo.save(record)

        logger.info(
            "File uploaded: %s for %s (%s, backend %s)",
            record.id,
            owner_id,
            record.category.value,
            record.storage_backend.value,
        )
        return record

    async def create_new_version(
        self,
        file_id: UUID,
        descriptor: FileDescriptor,
    ) -> FileRecord:
        """Point a record at a new blob, archiving the current one."""
        record = await self.get(file_id)
        record.create_new_version(descriptor)
        await self._file_repo.save(record)
        logger.info("File %s now at version %d", file_id, record.version)
        return record

    async def upload_new_version(
        self,
        file_id: UUID,
        content: bytes,
        original_name: str,
        mime_type: str,
    ) -> FileRecord:
        """Store new content for an existing record as its next version."""
        self._validate_upload(content, mime_type)
        record = await self.get(file_id)

        key, descriptor = await self._store(
            record.owner_id, content, original_name, mime_type
        )
        record.create_new_version(descriptor)
        await self._mirror(record, key, content)
        await self._file_repo.save(record)

        logger.info("File %s now at version %d", file_id, record.version)
        return record

    async def record_download(self, file_id: UUID) -> FileRecord:
        record = await self.get(file_id)
        record.record_download()
        await self._file_repo.save(record)
        return record

    async def grant_access(
        self,
        file_id: UUID,
        principal_id: UUID,
        permission: Permission = Permission.VIEW,
    ) -> FileRecord:
        record = await self.get(file_id)
        record.grant_access(principal_id, permission)
        await self._file_repo.save(record)
        logger.debug(
            "Granted %s on file %s to %s", permission.value, file_id, principal_id
        )
        return record

    async def get(self, file_id: UUID) -> FileRecord:
        record = await self._file_repo.find_by_id(file_id)
        if record is None:
            raise FileRecordNotFoundError(file_id)
        return record

    async def list_by_owner(
        self,
        owner_id: UUID,
        category: FileCategory | None = None,
    ) -> list[FileRecord]:
        return await self._file_repo.list_by_owner(owner_id, category)

    async def stats_by_owner(self, owner_id: UUID) -> FileStats:
        return await self._file_repo.stats_by_owner(owner_id)

    async def count(self) -> int:
        return await self._file_repo.count()

    async def delete_file(self, file_id: UUID) -> FileRecord:
        """Delete a record and, best effort, its stored blobs."""
        record = await self.get(file_id)
        await self._file_repo.delete(file_id)
        await self._discard_blobs(record)
        logger.info("File deleted: %s", file_id)
        return record

    async def handle_stale_file(self, file_id: UUID) -> bool:
        """Remove a file no longer referenced by a profile.

        Returns False if the record was already gone.
        """
        record = await self._file_repo.find_by_id(file_id)
        if record is None:
            logger.debug("Stale file %s already removed", file_id)
            return False

        await self._file_repo.delete(file_id)
        await self._discard_blobs(record)
        logger.info("Stale file removed: %s", file_id)
        return True

    async def delete_by_owner(self, owner_id: UUID) -> int:
        records = await self._file_repo.list_by_owner(owner_id)
        removed = await self._file_repo.delete_by_owner(owner_id)
        for record in records:
            await self._discard_blobs(record)
        if removed:
            logger.info("Deleted %d files of %s", removed, owner_id)
        return removed

    async def delete_expired(self, now: datetime | None = None) -> int:
        """Remove every record whose expires_at has elapsed."""
        expired = await self._file_repo.find_expired(now or utc_now())
        for record in expired:
            await self._file_repo.delete(record.id)
            await self._discard_blobs(record)
        if expired:
            logger.info("Purged %d expired files", len(expired))
        return len(expired)

    def _validate_upload(self, content: bytes, mime_type: str) -> None:
        if not content:
            msg = "Uploaded file is empty"
            raise InvalidUploadError(msg)

        if len(content) > self._max_upload_bytes:
            msg = (
                f"File too large: {len(content)} bytes "
                f"(limit {self._max_upload_bytes})"
            )
            raise InvalidUploadError(
                msg, size_bytes=len(content), limit=self._max_upload_bytes
            )

        if self._allowed_mime_prefixes and not mime_type.startswith(
            self._allowed_mime_prefixes
        ):
            msg = f"File type not allowed: {mime_type}"
            raise InvalidUploadError(msg, mime_type=mime_type)

    async def _store(
        self,
        owner_id: UUID,
        content: bytes,
        original_name: str,
        mime_type: str,
    ) -> tuple[str, FileDescriptor]:
        suffix = PurePath(original_name).suffix.lower()
        filename = f"{uuid4().hex}{suffix}"
        key = f"{owner_id}/{filename}"

        storage_path = await self._blob_storage.write(key, content)
        return key, FileDescriptor(
            filename=filename,
            original_name=original_name or filename,
            mime_type=mime_type,
            size_bytes=len(content),
            storage_path=storage_path,
            public_url=self._blob_storage.public_url(key),
        )

    async def _mirror(self, record: FileRecord, key: str, content: bytes) -> None:
        if self._object_storage is None:
            return

        try:
            stored = await self._object_storage.put(content, key, record.mime_type)
        except Exception as e:
            error = StorageBackendError(
                f"Mirroring file {record.id} to object storage failed: {e}",
                details={"file_id": str(record.id), "key": key},
            )
            logger.warning("%s; keeping local copy", error)
            return

        record.mark_mirrored(stored.key, stored.url)

    async def _discard_blobs(self, record: FileRecord) -> None:
        paths = [record.storage_path]
        paths.extend(v.storage_path for v in record.previous_versions)
        for path in paths:
            try:
                await self._blob_storage.delete(path)
            except Exception:
                logger.warning("Could not delete blob %s", path, exc_info=True)

        if self._object_storage is None:
            return

        keys = [record.object_key]
        keys.extend(v.object_key for v in record.previous_versions)
        for key in filter(None, keys):
            try:
                await self._object_storage.delete(key)
            except Exception:
                logger.warning("Could not delete object %s", key, exc_info=True)
