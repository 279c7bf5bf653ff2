from dataclasses import dataclass
from enum import Enum


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class FontSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class AppearanceSettings:
    theme: Theme = Theme.LIGHT
    color_scheme: str = "blue"
    font_size: FontSize = FontSize.MEDIUM
    reduced_motion: bool = False
    high_contrast: bool = False
