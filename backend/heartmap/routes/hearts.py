"""
HeartMap Backend — Heart Route Handlers
========================================

What:  POST /api/hearts (create a marker) and GET /api/hearts (list markers).
Why:   The two operations the map frontend performs.
How:   Receives the body, resolves the store and geocoder dependencies,
       delegates to HeartService.

Error responses come from the global exception handlers in main.py:
    400 {"error": "Missing required fields: type, latitude, longitude"}
    500 {"error": "Failed to create heart"} / {"error": "Failed to fetch hearts"}
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from heartmap.schemas.heart import ErrorResponse, HeartCreate, HeartResponse
from heartmap.services.geocoder_base import Geocoder
from heartmap.services.heart_service import heart_service
from heartmap.services.heart_store import HeartStore, get_heart_store
from heartmap.services.nominatim_service import get_geocoder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Hearts"])


@router.post(
    "/hearts",
    status_code=201,
    response_model=HeartResponse,
    responses={
        201: {"description": "Heart created", "model": HeartResponse},
        400: {"description": "Missing required fields", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Drop a heart on the map",
    description=(
        "Stores a heart marker at the given coordinates. The server resolves the "
        "country via reverse geocoding and assigns the timestamp."
    ),
)
async def create_heart(
    payload: HeartCreate,
    store: HeartStore = Depends(get_heart_store),
    geocoder: Geocoder = Depends(get_geocoder),
) -> HeartResponse:
    logger.info(
        "Received heart: type=%s lat=%s lon=%s",
        payload.type,
        payload.latitude,
        payload.longitude,
    )
    return await heart_service.create_heart(store=store, geocoder=geocoder, payload=payload)


@router.get(
    "/hearts",
    response_model=List[HeartResponse],
    responses={
        200: {"description": "All hearts, newest first"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List every heart, newest first",
)
async def list_hearts(
    store: HeartStore = Depends(get_heart_store),
) -> List[HeartResponse]:
    return await heart_service.list_hearts(store=store)
