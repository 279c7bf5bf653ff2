"""Audit entry for a single setting change."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from profilehub.domain.shared.time import utc_now

UNKNOWN_ACTOR = "unknown"


@dataclass(frozen=True)
class SettingChange:
    """One entry of the append-only change history.

    ``old_value`` and ``new_value`` are stored as JSON-compatible
    primitives (enum values, ISO strings) so the history survives schema
    changes of the settings groups.
    """

    setting_path: str
    old_value: Any
    new_value: Any
    changed_by: str = UNKNOWN_ACTOR
    changed_at: datetime = field(default_factory=utc_now)
    id: UUID = field(default_factory=uuid4)
