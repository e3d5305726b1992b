"""LatLng value object: immutable (lat, lng) pair as returned by the service."""

from pydantic import BaseModel, ConfigDict, model_validator

from mapquest_geocoding.config import settings


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    lat: float
    lng: float

    @model_validator(mode="after")
    def _check_range(self) -> "LatLng":
        # Values come from a trusted service; only checked when DEBUG is set.
        if settings.debug:
            if not -90.0 <= self.lat <= 90.0:
                raise ValueError(f"latitude out of range: {self.lat}")
            if not -180.0 <= self.lng <= 180.0:
                raise ValueError(f"longitude out of range: {self.lng}")
        return self
