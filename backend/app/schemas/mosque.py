"""Pydantic schemas for the mosque endpoints."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


# ── Facility enums ──────────────────────────────────


class ACStatus(str, Enum):
    working = "working"
    broken = "broken"
    partial = "partial"


class WudhuCleanliness(str, Enum):
    very_clean = "very_clean"
    clean = "clean"
    average = "average"
    needs_cleaning = "needs_cleaning"


class ShoeStorage(str, Enum):
    shelves = "shelves"
    lockers = "lockers"
    floor_only = "floor_only"
    none = "none"


# ── Shared fields ───────────────────────────────────


class MosqueFields(BaseModel):
    """Descriptive fields shared by stored mosques and submissions."""
    name: str
    address: str
    has_ac: bool = False
    ac_status: ACStatus | None = Field(default=None, description="Only meaningful when has_ac")
    wudhu_cleanliness: WudhuCleanliness | None = None
    separate_wudhu_areas: bool | None = None
    parking_available: bool = False
    bike_parking_available: bool = False
    wheelchair_accessible: bool = False
    prayer_mats_provided: bool = False
    shoe_storage: ShoeStorage | None = None
    open_24_hours: bool = False
    phone: str | None = None
    website: str | None = None
    google_maps_link: str | None = None
    image_url: str | None = None
    description: str | None = None
    friday_khutbah_time: str | None = None


# ── Response: Nearby ────────────────────────────────


class MosqueItem(MosqueFields):
    """A mosque annotated with its distance from the query point."""
    id: int
    latitude: float
    longitude: float
    distance: float = Field(ge=0, description="Great-circle distance in km (2 decimals)")


class Location(BaseModel):
    lat: float
    lng: float


class NearbyMosquesResponse(BaseModel):
    """Response for GET /mosques/nearby."""
    location: Location
    radius_km: float
    count: int
    mosques: list[MosqueItem]
    error: str | None = Field(default=None, description="Set when the data source failed")
    retryable: bool = False


class LocationProblem(BaseModel):
    """400 body asking the client to request the user's location again."""
    code: str = Field(description="LOCATION_REQUIRED | PERMISSION_DENIED | POSITION_UNAVAILABLE | TIMEOUT | UNKNOWN")
    message: str
    action: str = "request_location"


# ── Response: Detail ────────────────────────────────


class FacilityLabel(BaseModel):
    text: str
    tone: str = Field(description="good | warning | bad | info | neutral")
    icon: str


class FacilityLabels(BaseModel):
    ac: FacilityLabel
    wudhu: FacilityLabel
    shoe_storage: str


class MosqueDetailResponse(BaseModel):
    """Response for GET /mosques/nearby/{mosque_id}."""
    mosque: MosqueItem
    facilities: FacilityLabels
    directions_url: str


# ── Response: Map ───────────────────────────────────


class MapBounds(BaseModel):
    south: float
    west: float
    north: float
    east: float


class UserMarker(BaseModel):
    lat: float
    lng: float
    popup: str


class MosqueMarker(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance_label: str
    badges: list[str]
    highlight: bool = Field(description="Open 24 hours")


class MapViewResponse(BaseModel):
    """Response for GET /mosques/map."""
    center: Location
    zoom: int
    focus_zoom: int
    bounds: MapBounds | None
    user_marker: UserMarker
    markers: list[MosqueMarker]
    error: str | None = None


# ── Request/Response: Submission ────────────────────


class MosqueSubmission(MosqueFields):
    """Body for POST /submissions. Mosque minus id/distance; coordinates optional."""
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=500)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    separate_wudhu_areas: bool = False

    @field_validator(
        "name", "address", "ac_status", "wudhu_cleanliness", "shoe_storage",
        "phone", "website", "google_maps_link", "image_url", "description",
        "friday_khutbah_time",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value):
        # HTML forms send "" for unselected options
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator(
        "has_ac", "separate_wudhu_areas", "parking_available", "bike_parking_available",
        "wheelchair_accessible", "prayer_mats_provided", "open_24_hours",
        mode="before",
    )
    @classmethod
    def blank_checkbox(cls, value):
        # unchecked checkboxes may arrive as ""
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @field_validator("website", "google_maps_link", "image_url")
    @classmethod
    def http_url(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value

    @model_validator(mode="after")
    def drop_ac_status_without_ac(self):
        if not self.has_ac:
            self.ac_status = None
        return self


class SubmissionResponse(BaseModel):
    success: bool
    message: str
