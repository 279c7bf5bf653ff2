"""Tests for the FileRecord aggregate."""

from datetime import timedelta
from uuid import uuid4

import pytest

from profilehub.domain.files import (
    FileCategory,
    FileRecord,
    FileStats,
    CategoryStats,
    Permission,
    StorageBackend,
)
from profilehub.domain.shared.exceptions import ValidationError
from profilehub.domain.shared.time import utc_now
from tests.shared.fixtures.factories import make_descriptor


@pytest.fixture
def record() -> FileRecord:
    return FileRecord.create(uuid4(), make_descriptor("v1.png", size_bytes=100))


class TestCreate:
    def test_starts_at_version_one(self, record):
        assert record.version == 1
        assert record.previous_versions == []
        assert record.download_count == 0
        assert record.storage_backend == StorageBackend.LOCAL

    def test_copies_descriptor_fields(self):
        descriptor = make_descriptor(
            "doc.pdf",
            mime_type="application/pdf",
            category=FileCategory.DOCUMENT,
            tags=("cv",),
            is_public=True,
        )

        record = FileRecord.create(uuid4(), descriptor)

        assert record.mime_type == "application/pdf"
        assert record.category == FileCategory.DOCUMENT
        assert record.tags == ["cv"]
        assert record.is_public is True

    def test_descriptor_rejects_empty_filename(self):
        with pytest.raises(ValidationError):
            make_descriptor("")

    def test_descriptor_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            make_descriptor(size_bytes=-1)


class TestVersions:
    def test_new_version_archives_then_overwrites(self, record):
        archived = record.create_new_version(make_descriptor("v2.png", size_bytes=200))

        assert record.version == 2
        assert record.filename == "v2.png"
        assert record.size_bytes == 200
        assert archived.filename == "v1.png"
        assert record.previous_versions == [archived]

    def test_each_version_increments_by_one(self, record):
        for n in range(2, 6):
            record.create_new_version(make_descriptor(f"v{n}.png"))

        assert record.version == 5
        assert [v.filename for v in record.previous_versions] == [
            "v1.png",
            "v2.png",
            "v3.png",
            "v4.png",
        ]

    def test_new_version_drops_the_mirror(self, record):
        record.mark_mirrored("owner/v1.png", "https://cdn.example.com/v1.png")

        archived = record.create_new_version(make_descriptor("v2.png"))

        assert record.object_key is None
        assert record.storage_backend == StorageBackend.LOCAL
        assert archived.object_key == "owner/v1.png"


class TestDownloadsAndAccess:
    def test_record_download_counts(self, record):
        start = utc_now()
        for minutes in range(3):
            at = start + timedelta(minutes=minutes)
            record.record_download(at)
            assert record.last_accessed_at == at

        assert record.download_count == 3

    def test_record_download_refreshes_access_time(self, record):
        record.record_download()
        first = record.last_accessed_at

        record.record_download()

        assert first is not None
        assert record.last_accessed_at >= first

    def test_owner_and_grantees_can_access(self, record):
        friend, stranger = uuid4(), uuid4()

        record.grant_access(friend, Permission.VIEW)

        assert record.can_access(record.owner_id)
        assert record.can_access(friend)
        assert not record.can_access(stranger)

    def test_grant_replaces_earlier_grant(self, record):
        friend = uuid4()
        record.grant_access(friend, Permission.VIEW)

        record.grant_access(friend, Permission.EDIT)

        assert [g.permission for g in record.access_list] == [Permission.EDIT]

    def test_public_files_are_visible_to_all(self, record):
        record.is_public = True

        assert record.can_access(uuid4())

    def test_mark_mirrored(self, record):
        record.mark_mirrored("k", "https://cdn.example.com/k")

        assert record.storage_backend == StorageBackend.REMOTE
        assert record.public_url == "https://cdn.example.com/k"


class TestExpiry:
    def test_without_expiry_never_expires(self, record):
        assert not record.is_expired()

    def test_expires_at_the_deadline(self, record):
        now = utc_now()
        record.expires_at = now - timedelta(seconds=1)

        assert record.is_expired(now)
        assert not record.is_expired(now - timedelta(hours=1))


class TestCopy:
    def test_copy_does_not_share_lists(self, record):
        clone = record.copy()

        clone.tags.append("x")
        clone.record_download()

        assert record.tags == []
        assert record.download_count == 0


class TestFileStats:
    def test_totals_and_category_order(self):
        stats = FileStats.from_categories(
            [
                CategoryStats(FileCategory.IMAGE, 2, 300),
                CategoryStats(FileCategory.DOCUMENT, 1, 50),
            ]
        )

        assert stats.total_files == 3
        assert stats.total_size_bytes == 350
        assert [c.category for c in stats.by_category] == [
            FileCategory.DOCUMENT,
            FileCategory.IMAGE,
        ]
