"""FileRecord aggregate: metadata of one uploaded asset."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID, uuid4

from profilehub.domain.files.value_objects import (
    AccessGrant,
    FileCategory,
    FileDescriptor,
    FileVersion,
    ImageMetadata,
    Permission,
    ProcessingStatus,
    StorageBackend,
)
from profilehub.domain.shared.time import ensure_tz_aware, utc_now


@dataclass
class FileRecord:
    """File record aggregate, owned by one account.

    ``storage_path`` always points at the local primary copy. When the
    blob was also mirrored to object storage, ``storage_backend`` is
    ``remote`` and ``object_key``/``public_url`` locate the mirror.
    """

    owner_id: UUID
    filename: str
    original_name: str
    mime_type: str
    size_bytes: int
    storage_path: str
    storage_backend: StorageBackend = StorageBackend.LOCAL
    public_url: str | None = None
    object_key: str | None = None
    category: FileCategory = FileCategory.OTHER
    encoding: str | None = None
    tags: list[str] = field(default_factory=list)
    is_public: bool = False
    access_list: list[AccessGrant] = field(default_factory=list)
    image_metadata: ImageMetadata | None = None
    processing_status: ProcessingStatus = ProcessingStatus.COMPLETED
    download_count: int = 0
    last_accessed_at: datetime | None = None
    version: int = 1
    previous_versions: list[FileVersion] = field(default_factory=list)
    expires_at: datetime | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, owner_id: UUID, descriptor: FileDescriptor) -> "FileRecord":
        """Create a first-version record from a stored blob descriptor."""
        return cls(
            owner_id=owner_id,
            filename=descriptor.filename,
            original_name=descriptor.original_name,
            mime_type=descriptor.mime_type,
            size_bytes=descriptor.size_bytes,
            storage_path=descriptor.storage_path,
            storage_backend=descriptor.storage_backend,
            public_url=descriptor.public_url,
            category=descriptor.category,
            encoding=descriptor.encoding,
            tags=list(descriptor.tags),
            is_public=descriptor.is_public,
            image_metadata=descriptor.image_metadata,
            expires_at=(
                ensure_tz_aware(descriptor.expires_at)
                if descriptor.expires_at is not None
                else None
            ),
        )

    @property
    def descriptor(self) -> FileDescriptor:
        return FileDescriptor(
            filename=self.filename,
            original_name=self.original_name,
            mime_type=self.mime_type,
            size_bytes=self.size_bytes,
            storage_path=self.storage_path,
            storage_backend=self.storage_backend,
            public_url=self.public_url,
            category=self.category,
            encoding=self.encoding,
            tags=tuple(self.tags),
            is_public=self.is_public,
            image_metadata=self.image_metadata,
            expires_at=self.expires_at,
        )

    def create_new_version(self, descriptor: FileDescriptor) -> FileVersion:
        """Archive the current blob location, then point at the new one.

        Returns the archived version. ``version`` grows by exactly one.
        """
        now = utc_now()
        archived = FileVersion(
            filename=self.filename,
            storage_path=self.storage_path,
            archived_at=now,
            object_key=self.object_key,
        )
        self.previous_versions.append(archived)

        self.filename = descriptor.filename
        self.storage_path = descriptor.storage_path
        self.size_bytes = descriptor.size_bytes
        self.mime_type = descriptor.mime_type
        self.storage_backend = descriptor.storage_backend
        self.public_url = descriptor.public_url
        self.object_key = None
        if descriptor.image_metadata is not None:
            self.image_metadata = descriptor.image_metadata
        self.version += 1
        self.updated_at = now
        return archived

    def record_download(self, at: datetime | None = None) -> int:
        self.download_count += 1
        self.last_accessed_at = at or utc_now()
        self.updated_at = self.last_accessed_at
        return self.download_count

    def mark_mirrored(self, object_key: str, url: str) -> None:
        """Record a successful copy of the blob in object storage."""
        self.storage_backend = StorageBackend.REMOTE
        self.object_key = object_key
        self.public_url = url
        self.updated_at = utc_now()

    def grant_access(self, principal_id: UUID, permission: Permission) -> AccessGrant:
        """Grant a permission, replacing any earlier grant to the principal."""
        grant = AccessGrant(principal_id=principal_id, permission=permission)
        self.access_list = [
            g for g in self.access_list if g.principal_id != principal_id
        ] + [grant]
        self.updated_at = utc_now()
        return grant

    def can_access(self, principal_id: UUID) -> bool:
        if self.is_public or principal_id == self.owner_id:
            return True
        return any(g.principal_id == principal_id for g in self.access_list)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return ensure_tz_aware(self.expires_at) <= (now or utc_now())

    def copy(self) -> "FileRecord":
        return replace(
            self,
            tags=list(self.tags),
            access_list=list(self.access_list),
            previous_versions=list(self.previous_versions),
        )
