"""Image metadata value object."""

from dataclasses import dataclass

from profilehub.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class ImageMetadata:
    """Dimensions and format of an image file, all optional."""

    width: int | None = None
    height: int | None = None
    format: str | None = None
    has_alpha: bool | None = None
    color_space: str | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value < 0:
                msg = f"image {name} cannot be negative, got: {value}"
                raise ValidationError(msg, details={"field": f"image_metadata.{name}"})
