"""Primary blob storage port."""

from abc import ABC, abstractmethod


class BlobStorage(ABC):
    """Authoritative storage for uploaded file content.

    ``storage_path`` values returned by :meth:`write` are opaque to the
    application and are passed back unchanged to :meth:`delete`.
    """

    @abstractmethod
    async def write(self, key: str, content: bytes) -> str:
        """Write content and return its storage path."""

    @abstractmethod
    async def delete(self, storage_path: str) -> bool:
        """Delete stored content. Returns True if it existed."""

    @abstractmethod
    def public_url(self, key: str) -> str | None:
        """Return the URL the content is served from, if any."""
