"""Global exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses here, so routers
let them propagate instead of catching them one by one. Every error body
has the same shape: ``{"detail": ..., "code": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from profilehub.domain.shared.exceptions import (
    DomainException,
    DuplicateKeyError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from profilehub_auth import (
    AccountInactiveError,
    AuthError,
    PermissionDeniedError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # Validation (400)
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_UPLOAD: status.HTTP_400_BAD_REQUEST,
    # Duplicate key (400)
    ErrorCode.DUPLICATE_KEY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    # Not found (404)
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ACCOUNT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SETTINGS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PATH_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

AUTH_CODE_UNAUTHORIZED = "UNAUTHORIZED"
AUTH_CODE_FORBIDDEN = "FORBIDDEN"
AUTH_CODE_WEAK_PASSWORD = "WEAK_PASSWORD"


def _get_status_for_exception(exc: DomainException) -> int:
    """Return the HTTP status for a domain exception.

    Falls back on the exception class when the code has no explicit
    mapping, so new subclasses get a sensible status.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ValidationError, DuplicateKeyError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _get_status_for_auth_error(exc: AuthError) -> tuple[int, str]:
    if isinstance(exc, WeakPasswordError):
        return status.HTTP_400_BAD_REQUEST, AUTH_CODE_WEAK_PASSWORD
    if isinstance(exc, (PermissionDeniedError, AccountInactiveError)):
        return status.HTTP_403_FORBIDDEN, AUTH_CODE_FORBIDDEN
    return status.HTTP_401_UNAUTHORIZED, AUTH_CODE_UNAUTHORIZED


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the exception handlers on the application."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Domain error on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )
        else:
            logger.warning(
                "Domain exception on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )

        return _create_error_response(status_code, exc.message, exc.code.value)

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        status_code, code = _get_status_for_auth_error(exc)
        logger.info(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return _create_error_response(status_code, exc.message, code, headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error shape."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
