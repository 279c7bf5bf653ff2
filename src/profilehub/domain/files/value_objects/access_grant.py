from dataclasses import dataclass
from uuid import UUID

from profilehub.domain.files.value_objects.file_enums import Permission


@dataclass(frozen=True)
class AccessGrant:
    principal_id: UUID
    permission: Permission = Permission.VIEW
