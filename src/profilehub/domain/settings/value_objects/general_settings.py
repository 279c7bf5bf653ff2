"""General locale preferences."""

from dataclasses import dataclass
from enum import Enum

from profilehub.domain.shared.exceptions import ValidationError


class Language(str, Enum):
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    AR = "ar"
    ZH = "zh"
    JA = "ja"
    KO = "ko"


class DateFormat(str, Enum):
    US = "MM/dd/yyyy"
    EU = "dd/MM/yyyy"
    ISO = "yyyy-MM-dd"


class TimeFormat(str, Enum):
    H12 = "12h"
    H24 = "24h"


DEFAULT_TIMEZONE = "UTC"


@dataclass(frozen=True)
class GeneralSettings:
    """Language, timezone and display formats."""

    language: Language = Language.EN
    timezone: str = DEFAULT_TIMEZONE
    date_format: DateFormat = DateFormat.US
    time_format: TimeFormat = TimeFormat.H12
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not self.timezone:
            msg = "general.timezone cannot be empty"
            raise ValidationError(msg, details={"path": "general.timezone"})

        if len(self.currency) != 3:
            msg = f"general.currency must be 3 characters, got: {self.currency}"
            raise ValidationError(msg, details={"path": "general.currency"})
