"""Third-party integration settings."""

from dataclasses import dataclass, field
from enum import Enum


class RateLimitTier(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


@dataclass(frozen=True)
class SocialLoginSettings:
    google: bool = False
    facebook: bool = False
    twitter: bool = False
    linkedin: bool = False


@dataclass(frozen=True)
class ApiAccessSettings:
    enabled: bool = False
    api_key: str | None = None
    rate_limit_tier: RateLimitTier = RateLimitTier.BASIC


@dataclass(frozen=True)
class IntegrationSettings:
    social_login: SocialLoginSettings = field(default_factory=SocialLoginSettings)
    api_access: ApiAccessSettings = field(default_factory=ApiAccessSettings)
