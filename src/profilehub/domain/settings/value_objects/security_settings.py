"""Security settings value object."""

from dataclasses import dataclass
from enum import Enum

from profilehub.domain.shared.exceptions import ValidationError

MAX_SESSION_TIMEOUT_HOURS = 24 * 30


class TwoFactorMethod(str, Enum):
    SMS = "sms"
    EMAIL = "email"
    AUTHENTICATOR = "authenticator"


@dataclass(frozen=True)
class SecuritySettings:
    """Two-factor and session preferences."""

    two_factor_enabled: bool = False
    two_factor_method: TwoFactorMethod = TwoFactorMethod.EMAIL
    login_notifications: bool = True
    session_timeout_hours: int = 24
    allow_multiple_sessions: bool = True
    password_change_reminder: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.session_timeout_hours <= MAX_SESSION_TIMEOUT_HOURS:
            msg = (
                "security.session_timeout_hours must be between 1 and "
                f"{MAX_SESSION_TIMEOUT_HOURS}, got: {self.session_timeout_hours}"
            )
            raise ValidationError(
                msg, details={"path": "security.session_timeout_hours"}
            )
