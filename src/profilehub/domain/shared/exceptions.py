"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain layer. All domain exceptions inherit from DomainException so the
presentation layer can map them to HTTP responses in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_UPLOAD = "INVALID_UPLOAD"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    SETTINGS_NOT_FOUND = "SETTINGS_NOT_FOUND"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"

    # Duplicate Key (400)
    DUPLICATE_KEY = "DUPLICATE_KEY"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # Best-effort failures (logged, not surfaced by default)
    STORAGE_BACKEND_FAILED = "STORAGE_BACKEND_FAILED"
    PARTIAL_CASCADE_FAILURE = "PARTIAL_CASCADE_FAILURE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when a field constraint is violated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when an operation targets a missing id or path."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PathNotFoundError(EntityNotFoundError):
    """Raised when a dotted path does not resolve against a known shape."""

    def __init__(self, path: str, segment: str | None = None) -> None:
        self.path = path
        self.segment = segment or path
        super().__init__(
            f"Unknown path: {path}",
            ErrorCode.PATH_NOT_FOUND,
            {"path": path, "segment": self.segment},
        )


class DuplicateKeyError(DomainException):
    """Raised when a create violates a unique constraint."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DUPLICATE_KEY,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class StorageBackendError(DomainException):
    """Raised when a secondary storage backend rejects an operation.

    Mirroring failures are non-fatal: callers log this error and keep the
    primary copy authoritative.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.STORAGE_BACKEND_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PartialCascadeFailure(DomainException):
    """Describes a cascade delete where one or more steps failed.

    Attributes
    ----------
    failed_steps
        Mapping of step name to the error message of that step
    """

    def __init__(
        self,
        failed_steps: dict[str, str],
        code: ErrorCode = ErrorCode.PARTIAL_CASCADE_FAILURE,
    ) -> None:
        self.failed_steps = dict(failed_steps)
        steps = ", ".join(sorted(self.failed_steps))
        super().__init__(
            f"Cascade delete incomplete, failed steps: {steps}",
            code,
            {"failed_steps": self.failed_steps},
        )
