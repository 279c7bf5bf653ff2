"""Description of a stored blob, the input for creating file records."""

from dataclasses import dataclass, field
from datetime import datetime

from profilehub.domain.files.value_objects.file_enums import (
    FileCategory,
    StorageBackend,
)
from profilehub.domain.files.value_objects.image_metadata import ImageMetadata
from profilehub.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class FileDescriptor:
    """Where a blob was written and what it is.

    Produced by the storage layer after a successful write and consumed
    by ``FileRecord.create`` and ``FileRecord.create_new_version``.
    """

    filename: str
    original_name: str
    mime_type: str
    size_bytes: int
    storage_path: str
    storage_backend: StorageBackend = StorageBackend.LOCAL
    public_url: str | None = None
    category: FileCategory = FileCategory.OTHER
    encoding: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    is_public: bool = False
    image_metadata: ImageMetadata | None = None
    expires_at: datetime | None = None

    def __post_init__(self) -> None:
        for name in ("filename", "original_name", "mime_type", "storage_path"):
            if not getattr(self, name):
                msg = f"{name} cannot be empty"
                raise ValidationError(msg, details={"field": name})

        if self.size_bytes < 0:
            msg = f"size_bytes cannot be negative, got: {self.size_bytes}"
            raise ValidationError(msg, details={"field": "size_bytes"})
