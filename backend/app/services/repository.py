"""
Mosque data sources.

Every repository answers the same question: which mosques might be within
`radius_km` of a point. They may return extra candidates; the resolver
computes exact distances, filters and sorts.
"""

import logging
from abc import ABC, abstractmethod

from app.config import Settings
from app.database import get_pool
from app.services.geo import ROUNDING_MARGIN_KM, bounding_box
from app.services.mock_mosques import create_mock_mosques

logger = logging.getLogger(__name__)

MOSQUE_COLUMNS = """
    id, name, address, latitude, longitude,
    has_ac, ac_status, wudhu_cleanliness, separate_wudhu_areas,
    parking_available, bike_parking_available, wheelchair_accessible,
    prayer_mats_provided, shoe_storage, open_24_hours,
    phone, website, google_maps_link, image_url, description,
    friday_khutbah_time
"""


class MosqueRepository(ABC):
    """Source of candidate mosques for a nearby query."""

    @abstractmethod
    async def find_within_radius(self, lat: float, lng: float, radius_km: float) -> list[dict]:
        ...


class MockMosqueRepository(MosqueRepository):
    """Seeded synthetic mosques placed around the query point."""

    def __init__(self, seed: int = 42, count: int = 8):
        self.seed = seed
        self.count = count

    async def find_within_radius(self, lat: float, lng: float, radius_km: float) -> list[dict]:
        return create_mock_mosques(lat, lng, seed=self.seed, count=self.count)


class PostgresMosqueRepository(MosqueRepository):
    """Reads the `mosques` table through the asyncpg pool."""

    async def find_within_radius(self, lat: float, lng: float, radius_km: float) -> list[dict]:
        min_lat, max_lat, min_lng, max_lng = bounding_box(lat, lng, radius_km + ROUNDING_MARGIN_KM)
        pool = await get_pool()
        rows = await pool.fetch(f"""
            SELECT {MOSQUE_COLUMNS}
            FROM mosques
            WHERE latitude BETWEEN $1 AND $2
              AND longitude BETWEEN $3 AND $4
        """, min_lat, max_lat, min_lng, max_lng)
        logger.debug("Bounding box (%.4f..%.4f, %.4f..%.4f) matched %d rows",
                     min_lat, max_lat, min_lng, max_lng, len(rows))
        return [dict(r) for r in rows]


def get_repository(settings: Settings) -> MosqueRepository:
    """Postgres when a database is configured, otherwise the mock generator."""
    if settings.DATABASE_URL:
        return PostgresMosqueRepository()
    return MockMosqueRepository(seed=settings.MOCK_SEED, count=settings.MOCK_COUNT)
