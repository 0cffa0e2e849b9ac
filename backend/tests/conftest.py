import math

import pytest
from fastapi.testclient import TestClient

from app.api.mosques import repository_dependency, submission_sink_dependency
from app.config import Settings, get_settings
from app.main import app
from app.services.repository import MosqueRepository
from app.services.submissions import LoggingSubmissionSink

JAKARTA = (-6.2000, 106.8167)


def km_north(lat: float, km: float) -> float:
    """Latitude `km` kilometres north of `lat` along a meridian."""
    return lat + math.degrees(km / 6371.0)


def make_mosque(id: int, lat: float, lng: float, **overrides) -> dict:
    mosque = {
        "id": id,
        "name": f"Masjid {id}",
        "address": f"Jl. Contoh No. {id}",
        "latitude": lat,
        "longitude": lng,
        "has_ac": False,
        "ac_status": None,
        "wudhu_cleanliness": None,
        "separate_wudhu_areas": None,
        "parking_available": False,
        "bike_parking_available": False,
        "wheelchair_accessible": False,
        "prayer_mats_provided": False,
        "shoe_storage": None,
        "open_24_hours": False,
        "phone": None,
        "website": None,
        "google_maps_link": None,
        "image_url": None,
        "description": None,
        "friday_khutbah_time": None,
    }
    mosque.update(overrides)
    return mosque


class FixedRepository(MosqueRepository):
    """Returns mosques at fixed distances north of the query point."""

    def __init__(self, distances_km: dict[int, float], overrides: dict[int, dict] | None = None):
        self.distances_km = distances_km
        self.overrides = overrides or {}
        self.calls = []

    async def find_within_radius(self, lat, lng, radius_km):
        self.calls.append((lat, lng, radius_km))
        return [
            make_mosque(mid, km_north(lat, km), lng, **self.overrides.get(mid, {}))
            for mid, km in self.distances_km.items()
        ]


class FailingRepository(MosqueRepository):
    async def find_within_radius(self, lat, lng, radius_km):
        raise ConnectionError("database unreachable")


class FailingSink(LoggingSubmissionSink):
    async def submit(self, payload):
        raise RuntimeError("sink down")


@pytest.fixture
def settings():
    return Settings(_env_file=None, DATABASE_URL=None, SUPABASE_URL=None, SUPABASE_SERVICE_KEY=None)


@pytest.fixture
def repository():
    return FixedRepository(
        {1: 0.8, 2: 2.5, 3: 4.9, 4: 7.0},
        overrides={
            1: {"has_ac": True, "ac_status": "working", "open_24_hours": True, "bike_parking_available": True},
            2: {"wudhu_cleanliness": "needs_cleaning", "shoe_storage": "lockers"},
        },
    )


@pytest.fixture
def client(settings, repository):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[repository_dependency] = lambda: repository
    app.dependency_overrides[submission_sink_dependency] = lambda: LoggingSubmissionSink(delay_seconds=0)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
