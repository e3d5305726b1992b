"""Single-letter location codes used by the geocoding service."""

from enum import Enum


class LocationType(str, Enum):
    STOP = "s"
    VIA = "v"

    @classmethod
    def from_code(cls, code: str) -> "LocationType":
        """Decode a wire code; anything outside the table is an error."""
        try:
            return _LOCATION_TYPE_CODES[code]
        except (KeyError, TypeError):
            raise ValueError(
                f"unrecognized location type {code!r}, expected one of {sorted(_LOCATION_TYPE_CODES)}"
            ) from None


class SideOfStreet(str, Enum):
    LEFT = "l"
    RIGHT = "r"
    MIXED = "m"
    NONE = "n"

    @classmethod
    def from_code(cls, code: str) -> "SideOfStreet":
        """Decode a wire code; anything outside the table is an error."""
        try:
            return _SIDE_OF_STREET_CODES[code]
        except (KeyError, TypeError):
            raise ValueError(
                f"unrecognized side of street {code!r}, expected one of {sorted(_SIDE_OF_STREET_CODES)}"
            ) from None


_LOCATION_TYPE_CODES: dict[str, LocationType] = {
    "s": LocationType.STOP,
    "v": LocationType.VIA,
}

_SIDE_OF_STREET_CODES: dict[str, SideOfStreet] = {
    "l": SideOfStreet.LEFT,
    "r": SideOfStreet.RIGHT,
    "m": SideOfStreet.MIXED,
    "n": SideOfStreet.NONE,
}
