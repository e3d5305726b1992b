"""Errors raised by the geocoding client."""

from __future__ import annotations

from typing import Any


class GeocodingError(Exception):
    """Base class for every failure surfaced by the client."""


class TransportError(GeocodingError):
    """Sending the request or receiving the response failed.

    ``status_code`` is set when the service answered with a non-2xx status.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(GeocodingError):
    """The response body did not match the expected JSON schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
