from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileVersion:
    """Archived location of a superseded version of a file.

    ``object_key`` is set when that version had been mirrored to object
    storage, so the remote copy can be removed together with the record.
    """

    filename: str
    storage_path: str
    archived_at: datetime
    object_key: str | None = None
