"""MapQuest geocoding client."""

from mapquest_geocoding.application.ports.http_transport import HttpTransport
from mapquest_geocoding.application.use_cases.geocoding_client import GeocodingClient, format_lat_lng
from mapquest_geocoding.domain.entities.response import (
    GeocodeResponse,
    GeocodeResult,
    Info,
    Location,
    Options,
    ProvidedLocation,
    ReverseGeocodeResponse,
    ReverseGeocodeResult,
)
from mapquest_geocoding.domain.exceptions import DecodeError, GeocodingError, TransportError
from mapquest_geocoding.domain.value_objects.enums import LocationType, SideOfStreet
from mapquest_geocoding.domain.value_objects.lat_lng import LatLng

__all__ = [
    "DecodeError",
    "GeocodeResponse",
    "GeocodeResult",
    "GeocodingClient",
    "GeocodingError",
    "HttpTransport",
    "Info",
    "LatLng",
    "Location",
    "LocationType",
    "Options",
    "ProvidedLocation",
    "ReverseGeocodeResponse",
    "ReverseGeocodeResult",
    "SideOfStreet",
    "TransportError",
    "format_lat_lng",
]
