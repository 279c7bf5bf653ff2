"""File domain exceptions."""

from profilehub.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class FileRecordNotFoundError(EntityNotFoundError):
    """File record not found."""

    def __init__(self, file_id: object) -> None:
        self.file_id = file_id
        super().__init__(
            f"File not found: {file_id}",
            ErrorCode.FILE_NOT_FOUND,
            {"file_id": str(file_id)},
        )


class InvalidUploadError(ValidationError):
    """Uploaded content is empty, too large or of a rejected type."""

    def __init__(self, message: str, **details: object) -> None:
        super().__init__(message, ErrorCode.INVALID_UPLOAD, dict(details))
