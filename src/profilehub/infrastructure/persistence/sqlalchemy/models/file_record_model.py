"""SQLAlchemy model for FileRecord aggregate."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from profilehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class FileRecordModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting FileRecord aggregates.

    Indexed by (owner_id, category) for listings and statistics, and by
    expires_at for the expiry sweep.

    Table: files
    """

    __tablename__ = "files"
    __table_args__ = (Index("ix_files_owner_category", "owner_id", "category"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    )

    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(127), nullable=False)
    size_bytes: Mapped[int] = mapped_column(BigInteger, nullable=False)
    encoding: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    storage_backend: Mapped[str] = mapped_column(String(20), default="local")
    storage_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    public_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    object_key: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    category: Mapped[str] = mapped_column(String(32), default="other")
    tags: Mapped[list[Any]] = mapped_column(JSON, default=list)
    is_public: Mapped[bool] = mapped_column(default=False)
    access_list: Mapped[list[Any]] = mapped_column(JSON, default=list)
    image_metadata: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=True,
    )
    processing_status: Mapped[str] = mapped_column(String(20), default="completed")

    download_count: Mapped[int] = mapped_column(default=0)
    last_accessed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    version: Mapped[int] = mapped_column(default=1)
    previous_versions: Mapped[list[Any]] = mapped_column(JSON, default=list)
    expires_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<FileRecordModel(id={self.id}, filename={self.filename})>"
