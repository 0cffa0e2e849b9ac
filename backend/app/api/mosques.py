"""API routes for nearby mosques and mosque submissions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

from app.config import Settings, get_settings
from app.schemas.mosque import (
    FacilityLabels,
    Location,
    LocationProblem,
    MapViewResponse,
    MosqueDetailResponse,
    MosqueItem,
    MosqueSubmission,
    NearbyMosquesResponse,
    SubmissionResponse,
)
from app.services.facilities import describe_facilities, directions_url
from app.services.geo import InvalidCoordinate
from app.services.location import LocationErrorCode, location_problem
from app.services.map_view import build_map_view
from app.services.nearby import NearbyResult, fetch_nearby_mosques
from app.services.repository import MosqueRepository, get_repository
from app.services.submissions import SubmissionSink, get_submission_sink, submit_mosque

router = APIRouter(prefix="/mosques", tags=["Mosques"])
submissions_router = APIRouter(prefix="/submissions", tags=["Submissions"])


# ── Dependencies ────────────────────────────────────


def repository_dependency(settings: Settings = Depends(get_settings)) -> MosqueRepository:
    return get_repository(settings)


def submission_sink_dependency(settings: Settings = Depends(get_settings)) -> SubmissionSink:
    return get_submission_sink(settings)


class LocationRequired(Exception):
    """The client must (re)request the user's location before searching."""

    def __init__(self, code: LocationErrorCode | None = None):
        super().__init__(code)
        self.code = code


async def location_required_handler(request: Request, exc: LocationRequired) -> JSONResponse:
    """Registered on the app; turns LocationRequired into a 400 LocationProblem body."""
    return JSONResponse(status_code=400, content=location_problem(exc.code))


def _parse_coordinate(lat: str | None, lng: str | None, location_error: LocationErrorCode | None) -> tuple[float, float]:
    """
    Parse lat/lng query strings. A reported location failure, or missing or
    non-numeric coordinates, raise LocationRequired instead of leaving the
    client waiting.
    """
    if location_error is not None:
        raise LocationRequired(location_error)
    if not lat or not lng:
        raise LocationRequired()
    try:
        return float(lat), float(lng)
    except ValueError:
        raise LocationRequired() from None


async def _resolve(
    lat: float,
    lng: float,
    repository: MosqueRepository,
    settings: Settings,
    radius_km: float | None = None,
    max_results: int | None = None,
) -> NearbyResult:
    try:
        return await fetch_nearby_mosques(
            lat,
            lng,
            repository,
            radius_km=radius_km or settings.SEARCH_RADIUS_KM,
            max_results=max_results or settings.MAX_RESULTS,
            timeout=settings.QUERY_TIMEOUT_SECONDS,
        )
    except InvalidCoordinate as exc:
        raise HTTPException(status_code=400, detail=str(exc))


LOCATION_RESPONSES = {400: {"model": LocationProblem, "description": "Location missing, invalid or unavailable"}}


# ── GET /mosques/nearby ─────────────────────────────


@router.get(
    "/nearby",
    response_model=NearbyMosquesResponse,
    responses=LOCATION_RESPONSES,
    summary="Mosques near a coordinate, nearest first",
)
async def list_nearby_mosques(
    lat: str | None = Query(default=None, description="Latitude in degrees"),
    lng: str | None = Query(default=None, description="Longitude in degrees"),
    radius_km: float | None = Query(default=None, gt=0, le=50, description="Search radius override"),
    max_results: int | None = Query(default=None, ge=1, le=100, description="Result cap override"),
    location_error: LocationErrorCode | None = Query(default=None, description="Geolocation failure reported by the client"),
    repository: MosqueRepository = Depends(repository_dependency),
    settings: Settings = Depends(get_settings),
):
    """
    Return mosques within the search radius of (lat, lng), sorted by distance.
    A data-source failure yields an empty list with `error` set.
    """
    user_lat, user_lng = _parse_coordinate(lat, lng, location_error)
    radius = radius_km or settings.SEARCH_RADIUS_KM
    try:
        result = await _resolve(user_lat, user_lng, repository, settings, radius, max_results)
        return NearbyMosquesResponse(
            location=Location(lat=user_lat, lng=user_lng),
            radius_km=radius,
            count=len(result.mosques),
            mosques=[MosqueItem(**m) for m in result.mosques],
            error=result.error,
            retryable=result.retryable,
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Nearby endpoint failed at (%s, %s)", lat, lng)
        raise HTTPException(status_code=500, detail="Internal server error")


# ── GET /mosques/map ────────────────────────────────


@router.get(
    "/map",
    response_model=MapViewResponse,
    responses=LOCATION_RESPONSES,
    summary="Marker payload for the map view",
)
async def get_map_view(
    lat: str | None = Query(default=None),
    lng: str | None = Query(default=None),
    location_error: LocationErrorCode | None = Query(default=None),
    repository: MosqueRepository = Depends(repository_dependency),
    settings: Settings = Depends(get_settings),
):
    """Return the user marker, one marker per nearby mosque and the bounds to fit."""
    user_lat, user_lng = _parse_coordinate(lat, lng, location_error)
    try:
        result = await _resolve(user_lat, user_lng, repository, settings)
        view = build_map_view(user_lat, user_lng, result.mosques)
        return MapViewResponse(**view, error=result.error)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Map endpoint failed at (%s, %s)", lat, lng)
        raise HTTPException(status_code=500, detail="Internal server error")


# ── GET /mosques/nearby/{mosque_id} ─────────────────


@router.get(
    "/nearby/{mosque_id}",
    response_model=MosqueDetailResponse,
    responses=LOCATION_RESPONSES,
    summary="Details for a mosque selected from the nearby list",
)
async def get_mosque_detail(
    mosque_id: int,
    lat: str | None = Query(default=None),
    lng: str | None = Query(default=None),
    radius_km: float | None = Query(default=None, gt=0, le=50, description="Search radius override"),
    max_results: int | None = Query(default=None, ge=1, le=100, description="Result cap override"),
    repository: MosqueRepository = Depends(repository_dependency),
    settings: Settings = Depends(get_settings),
):
    user_lat, user_lng = _parse_coordinate(lat, lng, None)
    try:
        result = await _resolve(user_lat, user_lng, repository, settings, radius_km, max_results)
        if result.failed:
            raise HTTPException(status_code=503, detail=result.error)

        mosque = next((m for m in result.mosques if m["id"] == mosque_id), None)
        if mosque is None:
            raise HTTPException(status_code=404, detail="Mosque not found")

        return MosqueDetailResponse(
            mosque=MosqueItem(**mosque),
            facilities=FacilityLabels(**describe_facilities(mosque)),
            directions_url=directions_url(mosque),
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Detail endpoint failed for mosque %s", mosque_id)
        raise HTTPException(status_code=500, detail="Internal server error")


# ── POST /submissions ───────────────────────────────


@submissions_router.post(
    "",
    response_model=SubmissionResponse,
    status_code=202,
    responses={502: {"model": SubmissionResponse}},
    summary="Submit a new mosque for verification",
)
async def create_submission(
    payload: MosqueSubmission,
    sink: SubmissionSink = Depends(submission_sink_dependency),
):
    result = await submit_mosque(payload.model_dump(mode="json"), sink)
    if not result.success:
        return JSONResponse(
            status_code=502,
            content=SubmissionResponse(success=False, message=result.message).model_dump(),
        )
    return SubmissionResponse(success=True, message=result.message)
