"""Value objects for file records."""

from profilehub.domain.files.value_objects.access_grant import AccessGrant
from profilehub.domain.files.value_objects.file_descriptor import FileDescriptor
from profilehub.domain.files.value_objects.file_enums import (
    FileCategory,
    Permission,
    ProcessingStatus,
    StorageBackend,
)
from profilehub.domain.files.value_objects.file_stats import CategoryStats, FileStats
from profilehub.domain.files.value_objects.file_version import FileVersion
from profilehub.domain.files.value_objects.image_metadata import ImageMetadata

__all__ = [
    "AccessGrant",
    "CategoryStats",
    "FileCategory",
    "FileDescriptor",
    "FileStats",
    "FileVersion",
    "ImageMetadata",
    "Permission",
    "ProcessingStatus",
    "StorageBackend",
]
