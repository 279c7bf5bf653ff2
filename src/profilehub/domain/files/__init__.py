"""File domain: metadata of uploaded assets, many per account."""

from profilehub.domain.files.aggregates import FileRecord
from profilehub.domain.files.exceptions import (
    FileRecordNotFoundError,
    InvalidUploadError,
)
from profilehub.domain.files.repositories import FileRecordRepository
from profilehub.domain.files.value_objects import (
    AccessGrant,
    CategoryStats,
    FileCategory,
    FileDescriptor,
    FileStats,
    FileVersion,
    ImageMetadata,
    Permission,
    ProcessingStatus,
    StorageBackend,
)

__all__ = [
    "AccessGrant",
    "CategoryStats",
    "FileCategory",
    "FileDescriptor",
    "FileRecord",
    "FileRecordNotFoundError",
    "FileRecordRepository",
    "FileStats",
    "FileVersion",
    "ImageMetadata",
    "InvalidUploadError",
    "Permission",
    "ProcessingStatus",
    "StorageBackend",
]
