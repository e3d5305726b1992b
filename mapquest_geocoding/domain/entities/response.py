"""Response tree of the geocoding service.

Wire names differ from the attribute names, so each such field declares its
alias explicitly. Instances are frozen; decode a body with ``from_json``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from mapquest_geocoding.domain.exceptions import DecodeError
from mapquest_geocoding.domain.value_objects.enums import LocationType, SideOfStreet
from mapquest_geocoding.domain.value_objects.lat_lng import LatLng

_FROZEN = ConfigDict(frozen=True, strict=True, populate_by_name=True)


class Info(BaseModel):
    model_config = _FROZEN

    # See https://developer.mapquest.com/documentation/geocoding-api/status-codes/
    status_code: int = Field(ge=0, validation_alias=AliasChoices("status_code", "statuscode"))
    messages: list[str]

    @property
    def is_ok(self) -> bool:
        return self.status_code == 0


class Options(BaseModel):
    model_config = _FROZEN

    max_results: int = Field(alias="maxResults")
    thumb_maps: bool = Field(alias="thumbMaps")
    ignore_lat_lng_input: bool = Field(alias="ignoreLatLngInput")


class ProvidedLocation(BaseModel):
    model_config = _FROZEN

    location: str


class Location(BaseModel):
    """One candidate address match."""

    model_config = _FROZEN

    street: str
    admin_area_6: str = Field(alias="adminArea6")  # neighborhood
    admin_area_5: str = Field(alias="adminArea5")  # city
    admin_area_4: str = Field(alias="adminArea4")  # county
    admin_area_3: str = Field(alias="adminArea3")  # state
    admin_area_1: str = Field(alias="adminArea1")  # country

    location_type: LocationType = Field(alias="type")
    # Only meaningful for dragroute calls.
    drag_point: bool = Field(alias="dragPoint")
    display_lat_lng: LatLng = Field(alias="displayLatLng")
    side_of_street: SideOfStreet = Field(alias="sideOfStreet")

    # See https://developer.mapquest.com/documentation/geocoding-api/quality-codes/
    geocode_quality_code: str = Field(alias="geocodeQualityCode")
    geocode_quality: str = Field(alias="geocodeQuality")

    # Closest road edge, for routing.
    link_id: str = Field(alias="linkId")

    @field_validator("location_type", mode="before")
    @classmethod
    def _decode_location_type(cls, value):
        if isinstance(value, LocationType):
            return value
        return LocationType.from_code(value)

    @field_validator("side_of_street", mode="before")
    @classmethod
    def _decode_side_of_street(cls, value):
        if isinstance(value, SideOfStreet):
            return value
        return SideOfStreet.from_code(value)

    @property
    def lat_lng(self) -> LatLng:
        return self.display_lat_lng


class GeocodeResult(BaseModel):
    model_config = _FROZEN

    provided_location: ProvidedLocation = Field(alias="providedLocation")
    locations: list[Location]

    @property
    def provided_address(self) -> str:
        return self.provided_location.location


class ReverseGeocodeResult(BaseModel):
    model_config = _FROZEN

    provided_location: LatLng = Field(alias="providedLocation")
    locations: list[Location]


def _decode(model: type[BaseModel], body: bytes | str) -> Any:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(
            f"invalid {model.__name__} body: {e}",
            errors=e.errors(include_url=False),
        ) from e


class GeocodeResponse(BaseModel):
    model_config = _FROZEN

    info: Info
    options: Options
    results: list[GeocodeResult]

    @classmethod
    def from_json(cls, body: bytes | str) -> GeocodeResponse:
        """Decode a raw response body, raising DecodeError on any mismatch."""
        return _decode(cls, body)

    def __iter__(self) -> Iterator[GeocodeResult]:  # type: ignore[override]
        """Iterate over ``results``; unlike BaseModel, ``dict(response)`` is not field/value pairs."""
        return iter(self.results)


class ReverseGeocodeResponse(BaseModel):
    model_config = _FROZEN

    info: Info
    options: Options
    results: list[ReverseGeocodeResult]

    @classmethod
    def from_json(cls, body: bytes | str) -> ReverseGeocodeResponse:
        """Decode a raw response body, raising DecodeError on any mismatch."""
        return _decode(cls, body)

    def __iter__(self) -> Iterator[ReverseGeocodeResult]:  # type: ignore[override]
        """Iterate over ``results``; unlike BaseModel, ``dict(response)`` is not field/value pairs."""
        return iter(self.results)
