"""Failures reported by the client's location provider (browser geolocation)."""

from enum import Enum


class LocationErrorCode(str, Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    POSITION_UNAVAILABLE = "POSITION_UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"


# Extra code for a results request that arrives without coordinates
LOCATION_REQUIRED = "LOCATION_REQUIRED"

_PREFIX = "Tidak dapat mengakses lokasi Anda. "

_MESSAGES = {
    LocationErrorCode.PERMISSION_DENIED: _PREFIX + "Mohon izinkan akses lokasi pada browser.",
    LocationErrorCode.POSITION_UNAVAILABLE: _PREFIX + "Informasi lokasi tidak tersedia.",
    LocationErrorCode.TIMEOUT: _PREFIX + "Permintaan lokasi timeout.",
    LocationErrorCode.UNKNOWN: _PREFIX + "Terjadi kesalahan tidak dikenal.",
}

LOCATION_REQUIRED_MESSAGE = "Lokasi belum tersedia. Silakan izinkan akses lokasi untuk mencari masjid terdekat."


def location_error_message(code: LocationErrorCode) -> str:
    return _MESSAGES[code]


def location_problem(code: LocationErrorCode | None) -> dict:
    """
    Body for a 400 response telling the client to (re)request the user's location.
    `code=None` means coordinates were simply missing or malformed.
    """
    if code is None:
        return {
            "code": LOCATION_REQUIRED,
            "message": LOCATION_REQUIRED_MESSAGE,
            "action": "request_location",
        }
    return {
        "code": code.value,
        "message": location_error_message(code),
        "action": "request_location",
    }
