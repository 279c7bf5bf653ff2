"""Tests for FileRecordRepositorySQLAlchemy."""

from datetime import timedelta
from uuid import uuid4

import pytest

from profilehub.domain.files import FileCategory, FileRecord, Permission
from profilehub.domain.shared.time import utc_now
from tests.shared.fixtures.factories import make_descriptor


class TestFileRecordRepositorySQLAlchemy:
    @pytest.mark.asyncio
    async def test_round_trip_with_versions_and_grants(self, repositories, account):
        repo = repositories.file_repository()
        record = FileRecord.create(
            account.id, make_descriptor("v1.png", tags=("avatar",))
        )
        friend = uuid4()
        record.grant_access(friend, Permission.VIEW)
        record.create_new_version(make_descriptor("v2.png", size_bytes=2048))
        await repo.save(record)

        loaded = await repo.find_by_id(record.id)

        assert loaded.version == 2
        assert loaded.filename == "v2.png"
        assert [v.filename for v in loaded.previous_versions] == ["v1.png"]
        assert loaded.tags == ["avatar"]
        assert loaded.can_access(friend)

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, repositories, account):
        repo = repositories.file_repository()
        record = FileRecord.create(account.id, make_descriptor())
        await repo.save(record)

        record.record_download()
        await repo.save(record)

        assert (await repo.find_by_id(record.id)).download_count == 1
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_list_filter_and_stats(self, repositories, account):
        repo = repositories.file_repository()
        await repo.save(FileRecord.create(account.id, make_descriptor(size_bytes=100)))
        await repo.save(FileRecord.create(account.id, make_descriptor(size_bytes=200)))
        await repo.save(
            FileRecord.create(
                account.id,
                make_descriptor("cv.pdf", 50, FileCategory.DOCUMENT),
            )
        )

        images = await repo.list_by_owner(account.id, FileCategory.IMAGE)
        stats = await repo.stats_by_owner(account.id)

        assert len(images) == 2
        assert stats.total_files == 3
        assert stats.total_size_bytes == 350
        assert [(c.category, c.count) for c in stats.by_category] == [
            (FileCategory.DOCUMENT, 1),
            (FileCategory.IMAGE, 2),
        ]

    @pytest.mark.asyncio
    async def test_find_expired_and_delete_by_owner(self, repositories, account):
        repo = repositories.file_repository()
        now = utc_now()
        old = FileRecord.create(
            account.id, make_descriptor(expires_at=now - timedelta(hours=1))
        )
        await repo.save(old)
        await repo.save(
            FileRecord.create(
                account.id, make_descriptor(expires_at=now + timedelta(hours=1))
            )
        )

        expired = await repo.find_expired(now)

        assert [r.id for r in expired] == [old.id]
        assert await repo.delete_by_owner(account.id) == 2
        assert await repo.list_by_owner(account.id) == []
