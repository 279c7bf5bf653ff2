"""Object storage port used to mirror uploaded files.

The application only needs three operations from a remote object store;
adapters (S3, GCS, a test double) implement this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """Location of an object written to remote storage."""

    key: str
    url: str


class ObjectStorageClient(ABC):
    """Secondary storage for uploaded files."""

    @abstractmethod
    async def put(self, content: bytes, key: str, content_type: str) -> StoredObject:
        """Store ``content`` under ``key`` and return its public location."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete the object. Returns True if it existed."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether an object exists."""
