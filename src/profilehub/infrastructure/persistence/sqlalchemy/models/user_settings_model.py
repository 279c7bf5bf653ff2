"""SQLAlchemy models for UserSettings aggregate and its change history."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from profilehub.domain.shared.time import utc_now
from profilehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserSettingsModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting UserSettings aggregates.

    Each settings group is one JSON column, so adding a leaf to a group
    needs no migration; missing keys load with their defaults.
    """

    __tablename__ = "user_settings"

    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    general: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    privacy: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    notifications: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    security: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    appearance: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    data_management: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    communication: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    integrations: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    custom_settings: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    def __repr__(self) -> str:
        return f"<UserSettingsModel(account_id={self.account_id})>"


class SettingChangeModel(Base):
    """Append-only audit rows; never updated after insert."""

    __tablename__ = "setting_changes"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    account_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("user_settings.account_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Position in the history; changes of one reset share a timestamp
    sequence: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    setting_path: Mapped[str] = mapped_column(String(255), nullable=False)
    old_value: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    new_value: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    changed_by: Mapped[str] = mapped_column(String(255), default="unknown")
    changed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<SettingChangeModel(id={self.id}, path={self.setting_path})>"
