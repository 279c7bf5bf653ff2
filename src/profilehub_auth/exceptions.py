"""Authentication and authorization exceptions.

These exceptions are raised by the profilehub_auth package and by the
account service, and are mapped to 401/403 responses by the API layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AccountInactiveError(AuthError):
    """Raised when an inactive account attempts to log in."""

    def __init__(self, message: str = "Account is inactive"):
        super().__init__(message)


class PermissionDeniedError(AuthError):
    """Raised when the caller lacks the role required for an operation."""

    def __init__(self, message: str = "Administrator privileges required"):
        super().__init__(message)
