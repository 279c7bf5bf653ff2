"""profilehub auth - credential verification and token infrastructure.

This package is independent of the profilehub domain. It handles:
- Password hashing and verification (bcrypt)
- JWT access token creation and verification

Architecture:
    profilehub_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from profilehub_auth import PasswordHashingService, JWTService
"""

from profilehub_auth.exceptions import (
    AccountInactiveError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PermissionDeniedError,
    WeakPasswordError,
)
from profilehub_auth.schemas import TokenPayload
from profilehub_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AccountInactiveError",
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PermissionDeniedError",
    "WeakPasswordError",
]
