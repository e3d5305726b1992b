"""Tests for LatLng value object."""

import pytest
from pydantic import ValidationError

from mapquest_geocoding.config import settings
from mapquest_geocoding.domain.value_objects.lat_lng import LatLng


def test_lat_lng_values():
    p = LatLng(lat=37.4224, lng=-122.0841)
    assert p.lat == 37.4224
    assert p.lng == -122.0841


def test_lat_lng_accepts_json_integers():
    p = LatLng.model_validate_json('{"lat": 0, "lng": 180}')
    assert p.lat == 0.0
    assert p.lng == 180.0


def test_lat_lng_rejects_numeric_strings():
    with pytest.raises(ValidationError):
        LatLng.model_validate_json('{"lat": "37.4224", "lng": -122.0841}')


def test_lat_lng_is_frozen():
    p = LatLng(lat=43.0, lng=76.0)
    with pytest.raises(ValidationError):
        p.lat = 50.0


def test_lat_lng_out_of_range_accepted_by_default(monkeypatch):
    monkeypatch.setattr(settings, "debug", False)
    p = LatLng(lat=95.0, lng=-190.0)
    assert p.lat == 95.0
    assert p.lng == -190.0


def test_lat_lng_out_of_range_rejected_in_debug(monkeypatch):
    monkeypatch.setattr(settings, "debug", True)
    with pytest.raises(ValidationError, match="latitude out of range"):
        LatLng(lat=91.0, lng=0.0)
    with pytest.raises(ValidationError, match="longitude out of range"):
        LatLng(lat=0.0, lng=-180.5)
    assert LatLng(lat=90.0, lng=-180.0).lat == 90.0
