"""Coordinate validation and great-circle distance."""

import math

EARTH_RADIUS_KM = 6371.0

# Distances are compared after rounding to 2 decimals, so anything up to
# radius + 0.005 km can still match; prefilters must cover that margin.
ROUNDING_MARGIN_KM = 0.01


class InvalidCoordinate(ValueError):
    """Latitude/longitude outside the WGS84 range (or not a finite number)."""


def validate_coordinate(lat: float, lng: float) -> None:
    """Raise InvalidCoordinate unless lat is in [-90, 90] and lng in [-180, 180]."""
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinate(f"Coordinate must be finite, got ({lat}, {lng})")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinate(f"Latitude {lat} is outside [-90, 90]")
    if not -180.0 <= lng <= 180.0:
        raise InvalidCoordinate(f"Longitude {lng} is outside [-180, 180]")


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    R = EARTH_RADIUS_KM
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return R * c


def bounding_box(lat: float, lng: float, radius_km: float) -> tuple[float, float, float, float]:
    """
    Rough lat/lng window that contains every point within radius_km.
    Used as an index-friendly SQL prefilter; exact filtering is done with haversine.

    Returns (min_lat, max_lat, min_lng, max_lng).
    """
    dlat = math.degrees(radius_km / EARTH_RADIUS_KM)
    cos_lat = math.cos(math.radians(lat))
    dlng = 180.0 if cos_lat < 1e-6 else dlat / cos_lat
    min_lng, max_lng = lng - dlng, lng + dlng
    # Windows that wrap the antimeridian (or touch a pole) fall back to all longitudes
    if min_lng < -180.0 or max_lng > 180.0:
        min_lng, max_lng = -180.0, 180.0
    return (
        max(-90.0, lat - dlat),
        min(90.0, lat + dlat),
        min_lng,
        max_lng,
    )
