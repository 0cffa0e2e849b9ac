"""Marker payload for the client-side map renderer."""

DEFAULT_ZOOM = 14
FOCUS_ZOOM = 17  # zoom used when a mosque card is selected
BOUNDS_PADDING = 0.1
USER_POPUP = "Lokasi Anda"


def marker_badges(mosque: dict) -> list[str]:
    badges = []
    if mosque.get("has_ac"):
        badges.append("AC")
    if mosque.get("open_24_hours"):
        badges.append("24 Jam")
    if mosque.get("bike_parking_available"):
        badges.append("Parkir Motor")
    return badges


def padded_bounds(points: list[tuple[float, float]], pad: float = BOUNDS_PADDING) -> dict:
    """
    Bounding box of points, grown on each side by `pad` times its extent
    (same rule as Leaflet's LatLngBounds.pad).
    """
    lats = [p[0] for p in points]
    lngs = [p[1] for p in points]
    lat_buf = (max(lats) - min(lats)) * pad
    lng_buf = (max(lngs) - min(lngs)) * pad
    return {
        "south": min(lats) - lat_buf,
        "west": min(lngs) - lng_buf,
        "north": max(lats) + lat_buf,
        "east": max(lngs) + lng_buf,
    }


def build_map_view(lat: float, lng: float, mosques: list[dict]) -> dict:
    markers = [
        {
            "id": m["id"],
            "name": m["name"],
            "address": m["address"],
            "latitude": m["latitude"],
            "longitude": m["longitude"],
            "distance_label": f"{m['distance']}km",
            "badges": marker_badges(m),
            "highlight": bool(m.get("open_24_hours")),
        }
        for m in mosques
    ]

    bounds = None
    if mosques:
        points = [(lat, lng)] + [(m["latitude"], m["longitude"]) for m in mosques]
        bounds = padded_bounds(points)

    return {
        "center": {"lat": lat, "lng": lng},
        "zoom": DEFAULT_ZOOM,
        "focus_zoom": FOCUS_ZOOM,
        "bounds": bounds,
        "user_marker": {"lat": lat, "lng": lng, "popup": USER_POPUP},
        "markers": markers,
    }
