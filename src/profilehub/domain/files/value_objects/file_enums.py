"""Enumerations describing stored files."""

from enum import Enum


class StorageBackend(str, Enum):
    """Where the authoritative copy of a file lives."""

    LOCAL = "local"
    REMOTE = "remote"
    INLINE = "inline"


class FileCategory(str, Enum):
    PROFILE_PICTURE = "profile-picture"
    COVER_PHOTO = "cover-photo"
    DOCUMENT = "document"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    OTHER = "other"


class ProcessingStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class Permission(str, Enum):
    VIEW = "view"
    DOWNLOAD = "download"
    EDIT = "edit"
    DELETE = "delete"
