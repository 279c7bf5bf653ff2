from dataclasses import dataclass
from enum import Enum

from profilehub.domain.shared.exceptions import ValidationError

AUTO_REPLY_MAX_LENGTH = 200


class ContactMethod(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    SMS = "sms"
    IN_APP = "in-app"


@dataclass(frozen=True)
class CommunicationSettings:
    preferred_contact_method: ContactMethod = ContactMethod.EMAIL
    allow_direct_messages: bool = True
    auto_reply_enabled: bool = False
    auto_reply_message: str | None = None

    def __post_init__(self) -> None:
        if (
            self.auto_reply_message is not None
            and len(self.auto_reply_message) > AUTO_REPLY_MAX_LENGTH
        ):
            msg = (
                "communication.auto_reply_message cannot exceed "
                f"{AUTO_REPLY_MAX_LENGTH} characters"
            )
            raise ValidationError(
                msg, details={"path": "communication.auto_reply_message"}
            )
