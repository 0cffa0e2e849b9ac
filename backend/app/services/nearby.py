"""
Nearby mosque resolution.

`rank_nearby` is the pure core: distance annotation, radius filter, ordering.
`resolve_nearby` runs it over the seeded mock data synchronously.
`fetch_nearby_mosques` is the async call boundary used by the API; it is the
only place a real data source can time out or fail.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from app.services.geo import haversine_km, validate_coordinate
from app.services.mock_mosques import create_mock_mosques
from app.services.repository import MosqueRepository

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 5.0


@dataclass
class NearbyResult:
    """Outcome of a nearby query. `error` is set only when the data source failed."""
    mosques: list[dict] = field(default_factory=list)
    error: str | None = None
    retryable: bool = False

    @property
    def failed(self) -> bool:
        return self.error is not None


def rank_nearby(
    lat: float,
    lng: float,
    candidates: list[dict],
    radius_km: float = DEFAULT_RADIUS_KM,
    max_results: int | None = None,
) -> list[dict]:
    """
    Annotate candidates with `distance` (km, 2 decimals), drop those beyond
    radius_km (inclusive boundary), sort by (distance, id) and cap.

    Input dicts are not mutated.
    """
    validate_coordinate(lat, lng)

    ranked = []
    for c in candidates:
        distance = round(haversine_km(lat, lng, c["latitude"], c["longitude"]), 2)
        if distance > radius_km:
            continue
        mosque = {**c, "distance": distance}
        # ac_status is meaningless without AC
        if not mosque.get("has_ac"):
            mosque["ac_status"] = None
        ranked.append(mosque)

    ranked.sort(key=lambda m: (m["distance"], m["id"]))
    if max_results is not None:
        ranked = ranked[:max_results]
    return ranked


def resolve_nearby(
    lat: float,
    lng: float,
    radius_km: float = DEFAULT_RADIUS_KM,
    max_results: int | None = None,
    seed: int = 42,
    count: int = 8,
) -> list[dict]:
    """Mosques near (lat, lng) from the seeded mock generator, nearest first."""
    validate_coordinate(lat, lng)
    candidates = create_mock_mosques(lat, lng, seed=seed, count=count)
    return rank_nearby(lat, lng, candidates, radius_km, max_results)


async def fetch_nearby_mosques(
    lat: float,
    lng: float,
    repository: MosqueRepository,
    radius_km: float = DEFAULT_RADIUS_KM,
    max_results: int | None = None,
    timeout: float = 10.0,
) -> NearbyResult:
    """
    Query the repository and rank the result.

    Raises InvalidCoordinate before touching the repository. Timeouts and
    repository errors are logged and reported through NearbyResult.error so
    callers can tell a failed query from an empty one.
    """
    validate_coordinate(lat, lng)

    try:
        candidates = await asyncio.wait_for(
            repository.find_within_radius(lat, lng, radius_km),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.warning("Nearby query timed out after %.1fs at (%.5f, %.5f)", timeout, lat, lng)
        return NearbyResult(error="Pencarian masjid melebihi batas waktu.", retryable=True)
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("Nearby query failed at (%.5f, %.5f)", lat, lng)
        return NearbyResult(error="Gagal memuat data masjid.", retryable=True)

    mosques = rank_nearby(lat, lng, candidates, radius_km, max_results)
    logger.info("Nearby: %d of %d candidates within %.1f km of (%.5f, %.5f)",
                len(mosques), len(candidates), radius_km, lat, lng)
    return NearbyResult(mosques=mosques)
