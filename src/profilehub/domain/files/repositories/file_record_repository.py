"""Abstract repository for file records."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from profilehub.domain.files.aggregates import FileRecord
from profilehub.domain.files.value_objects import FileCategory, FileStats


class FileRecordRepository(ABC):
    """Repository interface for FileRecord aggregates."""

    @abstractmethod
    async def save(self, record: FileRecord) -> FileRecord:
        """Insert or update a file record."""

    @abstractmethod
    async def find_by_id(self, file_id: UUID) -> FileRecord | None:
        """Find a file record by its ID."""

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: UUID,
        category: FileCategory | None = None,
    ) -> list[FileRecord]:
        """List an owner's records, newest first."""

    @abstractmethod
    async def stats_by_owner(self, owner_id: UUID) -> FileStats:
        """Count files and bytes of one owner, grouped by category."""

    @abstractmethod
    async def delete(self, file_id: UUID) -> bool:
        """Delete a file record. Returns True if deleted."""

    @abstractmethod
    async def delete_by_owner(self, owner_id: UUID) -> int:
        """Delete all records of an owner. Returns the number removed."""

    @abstractmethod
    async def find_expired(self, now: datetime) -> list[FileRecord]:
        """Find records whose expires_at is at or before ``now``."""

    @abstractmethod
    async def count(self) -> int:
        """Count all file records."""
