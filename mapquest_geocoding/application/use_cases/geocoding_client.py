"""Geocoding client for forward and reverse lookups against the MapQuest API."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mapquest_geocoding.adapters.http.httpx_transport import HttpxTransport
from mapquest_geocoding.application.ports.http_transport import HttpTransport
from mapquest_geocoding.config import DEFAULT_BASE_URL, Settings
from mapquest_geocoding.config import settings as default_settings
from mapquest_geocoding.domain.entities.response import GeocodeResponse, ReverseGeocodeResponse
from mapquest_geocoding.domain.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)


def format_lat_lng(lat: float, lng: float) -> str:
    """Render a coordinate pair as the ``location`` query value, e.g. ``"37.4224,-122.0841"``."""
    return f"{lat},{lng}"


class GeocodingClient:
    """Issues one GET per call and decodes the body into the response tree.

    The client does not interpret ``info.status_code``; a "no match" answer
    is still a successful response. Safe to share across threads when the
    transport is.
    """

    def __init__(
        self,
        api_key: str,
        transport: HttpTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        self._api_key = api_key
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GeocodingClient:
        settings = settings or default_settings
        client = cls(
            api_key=settings.mapquest_api_key,
            transport=HttpxTransport(timeout=settings.mapquest_timeout),
            base_url=settings.mapquest_base_url,
        )
        client._owns_transport = True
        return client

    def close(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> GeocodingClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def geocode(self, address: str) -> GeocodeResponse:
        """Forward geocoding: find candidate coordinates for a free-form address.

        See https://developer.mapquest.com/documentation/geocoding-api/address/get/
        """
        body = self._get("address", address)
        return self._decode(GeocodeResponse, body)

    def reverse_geocode(self, lat: float, lng: float) -> ReverseGeocodeResponse:
        """Reverse geocoding: find the address nearest to a coordinate pair.

        See https://developer.mapquest.com/documentation/geocoding-api/reverse/get
        """
        body = self._get("reverse", format_lat_lng(lat, lng))
        return self._decode(ReverseGeocodeResponse, body)

    def _get(self, endpoint: str, location: str) -> bytes:
        url = f"{self._base_url}/{endpoint}"
        params: Mapping[str, str] = {"key": self._api_key, "location": location}
        logger.debug("GET %s location=%r", url, location)
        try:
            return self._transport.get(url, params)
        except TransportError as e:
            logger.warning("Geocoding request to %s failed: %s", url, e)
            raise

    @staticmethod
    def _decode(model, body: bytes):
        try:
            return model.from_json(body)
        except DecodeError as e:
            logger.warning("Could not decode %s: %d error(s)", model.__name__, len(e.errors))
            raise
