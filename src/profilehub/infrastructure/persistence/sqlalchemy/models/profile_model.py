"""SQLAlchemy model for Profile aggregate."""

from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from profilehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ProfileModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Profile aggregates.

    Nested value objects (location, links, privacy, ...) are stored as
    JSON documents; scalar fields used for completeness have columns.

    Table: profiles
    """

    __tablename__ = "profiles"

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    bio: Mapped[str] = mapped_column(Text, default="")
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    gender: Mapped[str] = mapped_column(String(32), default="prefer-not-to-say")

    location: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    social_links: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    emergency_contact: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    profile_picture: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=True,
    )
    cover_photo: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=True,
    )
    privacy: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    notification_prefs: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    custom_fields: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    view_count: Mapped[int] = mapped_column(default=0)
    completeness_percent: Mapped[int] = mapped_column(default=0)
    last_profile_update: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ProfileModel(account_id={self.account_id})>"
