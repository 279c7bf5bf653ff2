"""Unit tests for FileRecordService."""

from datetime import timedelta
from pathlib import Path
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from profilehub.application.ports import StoredObject
from profilehub.domain.files import (
    FileCategory,
    FileRecordNotFoundError,
    InvalidUploadError,
    StorageBackend,
)
from profilehub.domain.shared.time import utc_now
from tests.shared.fixtures.factories import build_services

PNG = b"\x89PNG\r\n\x1a\n fake image body"


def _object_storage(fail: bool = False) -> AsyncMock:
    client = AsyncMock()
    if fail:
        client.put.side_effect = ConnectionError("bucket unreachable")
    else:
        client.put.return_value = StoredObject(
            key="mirrored", url="https://cdn.example.com/mirrored"
        )
    return client


class TestUpload:
    @pytest.mark.asyncio
    async def test_writes_blob_and_record(self, services):
        owner_id = uuid4()

        record = await services.files.upload(
            owner_id, PNG, "Holiday.PNG", "image/png", tags=["travel"]
        )

        assert Path(record.storage_path).read_bytes() == PNG
        assert record.filename.endswith(".png")
        assert record.original_name == "Holiday.PNG"
        assert record.size_bytes == len(PNG)
        assert record.tags == ["travel"]
        assert record.storage_backend == StorageBackend.LOCAL
        assert record.public_url.startswith("http://testserver/uploads/")
        assert (await services.files.get(record.id)).id == record.id

    @pytest.mark.asyncio
    async def test_rejects_empty_content(self, services):
        with pytest.raises(InvalidUploadError):
            await services.files.upload(uuid4(), b"", "a.png", "image/png")

    @pytest.mark.asyncio
    async def test_rejects_oversized_content(self, tmp_path):
        services = build_services(tmp_path, max_upload_bytes=4)

        with pytest.raises(InvalidUploadError):
            await services.files.upload(uuid4(), PNG, "a.png", "image/png")

    @pytest.mark.asyncio
    async def test_rejects_disallowed_type(self, services):
        with pytest.raises(InvalidUploadError):
            await services.files.upload(uuid4(), b"MZ", "tool.exe", "application/x")

        assert await services.files.count() == 0

    @pytest.mark.asyncio
    async def test_mirrors_to_object_storage(self, tmp_path):
        client = _object_storage()
        services = build_services(tmp_path, object_storage=client)

        record = await services.files.upload(uuid4(), PNG, "a.png", "image/png")

        client.put.assert_awaited_once()
        assert record.storage_backend == StorageBackend.REMOTE
        assert record.object_key == "mirrored"
        assert record.public_url == "https://cdn.example.com/mirrored"

    @pytest.mark.asyncio
    async def test_failed_mirror_keeps_local_copy(self, tmp_path):
        services = build_services(tmp_path, object_storage=_object_storage(fail=True))

        record = await services.files.upload(uuid4(), PNG, "a.png", "image/png")

        assert record.storage_backend == StorageBackend.LOCAL
        assert record.object_key is None
        assert Path(record.storage_path).exists()
        assert (await services.files.get(record.id)).id == record.id


class TestVersionsAndAccess:
    @pytest.mark.asyncio
    async def test_upload_new_version(self, services):
        record = await services.files.upload(uuid4(), PNG, "v1.png", "image/png")

        updated = await services.files.upload_new_version(
            record.id, PNG + b"v2", "v2.png", "image/png"
        )

        assert updated.version == 2
        assert updated.previous_versions[0].storage_path == record.storage_path
        assert Path(record.storage_path).exists()
        assert updated.size_bytes == len(PNG) + 2

    @pytest.mark.asyncio
    async def test_record_download(self, services):
        record = await services.files.upload(uuid4(), PNG, "a.png", "image/png")
        assert record.last_accessed_at is None

        seen = []
        for _ in range(3):
            before = utc_now()
            updated = await services.files.record_download(record.id)
            assert updated.last_accessed_at >= before
            seen.append(updated.last_accessed_at)

        stored = await services.files.get(record.id)
        assert stored.download_count == 3
        assert seen == sorted(seen)
        assert stored.last_accessed_at == seen[-1]

    @pytest.mark.asyncio
    async def test_delete_removes_mirrors_of_every_version(self, tmp_path):
        client = AsyncMock()
        client.put.side_effect = [
            StoredObject(key="k1", url="https://cdn.example.com/k1"),
            StoredObject(key="k2", url="https://cdn.example.com/k2"),
        ]
        services = build_services(tmp_path, object_storage=client)
        record = await services.files.upload(uuid4(), PNG, "v1.png", "image/png")
        updated = await services.files.upload_new_version(
            record.id, PNG, "v2.png", "image/png"
        )
        assert updated.previous_versions[0].object_key == "k1"
        assert updated.object_key == "k2"

        await services.files.delete_file(record.id)

        deleted = sorted(call.args[0] for call in client.delete.await_args_list)
        assert deleted == ["k1", "k2"]

    @pytest.mark.asyncio
    async def test_unknown_file(self, services):
        with pytest.raises(FileRecordNotFoundError):
            await services.files.get(uuid4())


class TestCleanup:
    @pytest.mark.asyncio
    async def test_delete_by_owner_removes_blobs(self, services):
        owner_id, other_id = uuid4(), uuid4()
        first = await services.files.upload(owner_id, PNG, "a.png", "image/png")
        await services.files.upload_new_version(first.id, PNG, "b.png", "image/png")
        kept = await services.files.upload(other_id, PNG, "c.png", "image/png")

        removed = await services.files.delete_by_owner(owner_id)

        assert removed == 1
        assert not Path(first.storage_path).exists()
        assert await services.files.list_by_owner(owner_id) == []
        assert Path(kept.storage_path).exists()

    @pytest.mark.asyncio
    async def test_delete_expired(self, services):
        owner_id = uuid4()
        expired = await services.files.upload(
            owner_id,
            PNG,
            "old.png",
            "image/png",
            expires_at=utc_now() - timedelta(minutes=1),
        )
        fresh = await services.files.upload(
            owner_id,
            PNG,
            "new.png",
            "image/png",
            expires_at=utc_now() + timedelta(days=1),
        )

        purged = await services.files.delete_expired()

        assert purged == 1
        remaining = await services.files.list_by_owner(owner_id)
        assert [r.id for r in remaining] == [fresh.id]
        assert not Path(expired.storage_path).exists()

    @pytest.mark.asyncio
    async def test_stats_by_owner(self, services):
        owner_id = uuid4()
        await services.files.upload(owner_id, PNG, "a.png", "image/png")
        await services.files.upload(
            owner_id, PNG, "b.png", "image/png", category=FileCategory.IMAGE
        )

        stats = await services.files.stats_by_owner(owner_id)

        assert stats.total_files == 2
        assert stats.total_size_bytes == 2 * len(PNG)
        assert {c.category for c in stats.by_category} == {
            FileCategory.IMAGE,
            FileCategory.OTHER,
        }
