"""Reference from a profile to an uploaded image."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MediaReference:
    """Weak reference to a file record plus its public URL.

    The profile never owns the referenced file; replacing the reference
    hands the old file id back to the file store.
    """

    file_id: UUID | None = None
    url: str | None = None
    uploaded_at: datetime | None = None
