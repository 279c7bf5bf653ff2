"""Local filesystem blob storage."""

import asyncio
import logging
from pathlib import Path

from profilehub.application.ports import BlobStorage
from profilehub.domain.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class LocalFileStorage(BlobStorage):
    """Stores blobs below a root directory, keyed by relative path.

    Files are served by the API under ``{public_base_url}/uploads/{key}``.
    """

    def __init__(self, root: str | Path, public_base_url: str | None = None):
        self._root = Path(root).resolve()
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None

    @property
    def root(self) -> Path:
        return self._root

    async def write(self, key: str, content: bytes) -> str:
        path = self._resolve(key)
        await asyncio.to_thread(self._write_sync, path, content)
        logger.debug("Wrote %d bytes to %s", len(content), path)
        return str(path)

    async def delete(self, storage_path: str) -> bool:
        path = Path(storage_path)
        if not path.is_relative_to(self._root):
            logger.warning("Refusing to delete outside storage root: %s", path)
            return False
        return await asyncio.to_thread(self._delete_sync, path)

    def public_url(self, key: str) -> str | None:
        if self._public_base_url is None:
            return None
        return f"{self._public_base_url}/uploads/{key}"

    def _resolve(self, key: str) -> Path:
        path = (self._root / key).resolve()
        if not path.is_relative_to(self._root):
            msg = f"Invalid storage key: {key}"
            raise ValidationError(msg, details={"key": key})
        return path

    @staticmethod
    def _write_sync(path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    @staticmethod
    def _delete_sync(path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
