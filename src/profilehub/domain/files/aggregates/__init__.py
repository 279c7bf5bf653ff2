from profilehub.domain.files.aggregates.file_record import FileRecord

__all__ = ["FileRecord"]
