"""Location value objects."""

from dataclasses import dataclass

from profilehub.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class Coordinates:
    latitude: float | None = None
    longitude: float | None = None

    def __post_init__(self):
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            msg = f"latitude out of range: {self.latitude}"
            raise ValidationError(msg, details={"field": "location.coordinates"})
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            msg = f"longitude out of range: {self.longitude}"
            raise ValidationError(msg, details={"field": "location.coordinates"})


@dataclass(frozen=True)
class Location:
    city: str | None = None
    state: str | None = None
    country: str | None = None
    coordinates: Coordinates | None = None
