from profilehub.domain.files.repositories.file_record_repository import (
    FileRecordRepository,
)

__all__ = ["FileRecordRepository"]
