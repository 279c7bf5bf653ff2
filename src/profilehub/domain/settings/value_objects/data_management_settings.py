"""Backup and retention preferences."""

from dataclasses import dataclass
from enum import Enum

from profilehub.domain.shared.exceptions import ValidationError


class BackupFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    XML = "xml"


@dataclass(frozen=True)
class DataManagementSettings:
    auto_backup: bool = True
    backup_frequency: BackupFrequency = BackupFrequency.WEEKLY
    retention_days: int = 365
    export_format: ExportFormat = ExportFormat.JSON

    def __post_init__(self) -> None:
        if self.retention_days < 1:
            msg = (
                "data_management.retention_days must be positive, "
                f"got: {self.retention_days}"
            )
            raise ValidationError(
                msg, details={"path": "data_management.retention_days"}
            )
