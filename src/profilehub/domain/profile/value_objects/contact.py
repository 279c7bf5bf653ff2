"""Social links and emergency contact value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SocialLinks:
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    instagram: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class EmergencyContact:
    name: str | None = None
    phone: str | None = None
    relationship: str | None = None
