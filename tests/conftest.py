"""Pytest configuration and shared fixtures."""

import copy
import json

import pytest

LOCATION = {
    "street": "1600 Amphitheatre Pkwy",
    "adminArea6": "",
    "adminArea5": "Mountain View",
    "adminArea4": "Santa Clara",
    "adminArea3": "CA",
    "adminArea1": "US",
    "type": "s",
    "dragPoint": False,
    "displayLatLng": {"lat": 37.4224, "lng": -122.0841},
    "sideOfStreet": "n",
    "geocodeQualityCode": "P1AAA",
    "geocodeQuality": "POINT",
    "linkId": "r23094839",
}

ENVELOPE = {
    "info": {"status_code": 0, "messages": []},
    "options": {"maxResults": 1, "thumbMaps": True, "ignoreLatLngInput": False},
}


@pytest.fixture
def location_payload():
    return copy.deepcopy(LOCATION)


@pytest.fixture
def geocode_payload(location_payload):
    payload = copy.deepcopy(ENVELOPE)
    payload["results"] = [
        {
            "providedLocation": {"location": "1600 Amphitheatre Parkway, Mountain View, CA"},
            "locations": [location_payload],
        }
    ]
    return payload


@pytest.fixture
def reverse_payload(location_payload):
    payload = copy.deepcopy(ENVELOPE)
    payload["results"] = [
        {
            "providedLocation": {"lat": 37.4224, "lng": -122.0841},
            "locations": [location_payload],
        }
    ]
    return payload


@pytest.fixture
def as_body():
    def _dump(payload) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _dump
