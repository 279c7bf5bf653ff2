"""Shared domain building blocks: exceptions, time and path helpers."""

from profilehub.domain.shared.exceptions import (
    DomainException,
    DuplicateKeyError,
    EntityNotFoundError,
    ErrorCode,
    PartialCascadeFailure,
    PathNotFoundError,
    StorageBackendError,
    ValidationError,
)
from profilehub.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "DomainException",
    "DuplicateKeyError",
    "EntityNotFoundError",
    "ErrorCode",
    "PartialCascadeFailure",
    "PathNotFoundError",
    "StorageBackendError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
