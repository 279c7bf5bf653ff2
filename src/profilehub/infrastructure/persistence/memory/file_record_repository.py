"""In-memory implementation of FileRecordRepository."""

from collections import defaultdict
from datetime import datetime
from uuid import UUID

from profilehub.domain.files import (
    CategoryStats,
    FileCategory,
    FileRecord,
    FileRecordRepository,
    FileStats,
)


class FileRecordRepositoryMemory(FileRecordRepository):
    def __init__(self) -> None:
        self._records: dict[UUID, FileRecord] = {}

    async def save(self, record: FileRecord) -> FileRecord:
        self._records[record.id] = record.copy()
        return record

    async def find_by_id(self, file_id: UUID) -> FileRecord | None:
        record = self._records.get(file_id)
        return record.copy() if record else None

    async def list_by_owner(
        self,
        owner_id: UUID,
        category: FileCategory | None = None,
    ) -> list[FileRecord]:
        records = [
            r
            for r in self._records.values()
            if r.owner_id == owner_id and (category is None or r.category == category)
        ]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return [r.copy() for r in records]

    async def stats_by_owner(self, owner_id: UUID) -> FileStats:
        counts: dict[FileCategory, list[int]] = defaultdict(lambda: [0, 0])
        for record in self._records.values():
            if record.owner_id == owner_id:
                counts[record.category][0] += 1
                counts[record.category][1] += record.size_bytes

        return FileStats.from_categories(
            [
                CategoryStats(category=c, count=n, total_size_bytes=size)
                for c, (n, size) in counts.items()
            ]
        )

    async def delete(self, file_id: UUID) -> bool:
        return self._records.pop(file_id, None) is not None

    async def delete_by_owner(self, owner_id: UUID) -> int:
        ids = [r.id for r in self._records.values() if r.owner_id == owner_id]
        for file_id in ids:
            del self._records[file_id]
        return len(ids)

    async def find_expired(self, now: datetime) -> list[FileRecord]:
        return [r.copy() for r in self._records.values() if r.is_expired(now)]

    async def count(self) -> int:
        return len(self._records)
