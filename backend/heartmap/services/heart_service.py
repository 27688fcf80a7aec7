"""
HeartMap Backend — Heart Service (Business Logic)
==================================================

What:  Validates heart submissions, enriches them with a country, and
       reads/writes them through the injected HeartStore.
Why:   Keeps the route handlers thin and the workflow testable without HTTP.
Who:   Called by routes/hearts.py.

Create Flow (POST /api/hearts):
    ┌──────────┐    ┌────────────┐    ┌──────────────┐    ┌──────────┐
    │ Validate │───▶│  Geocoder  │───▶│ Build record │───▶│  Store   │
    │ presence │    │ (country)  │    │ (timestamp)  │    │  (add)   │
    └──────────┘    └────────────┘    └──────────────┘    └──────────┘

    Missing fields       → ValidationError (400), nothing stored
    Geocoder trouble     → sentinel location values, creation continues
    Anything else        → DatabaseError("Failed to create heart") (500)

Design Decision:
    HeartService is stateless. It receives the store and geocoder on every
    call, so tests pass fakes directly and no request shares mutable state.
"""

import logging
from datetime import datetime, timezone
from typing import List

from heartmap.exceptions import DatabaseError, ValidationError
from heartmap.models.heart import Heart, HeartType
from heartmap.schemas.heart import HeartCreate, HeartResponse
from heartmap.services.geocoder_base import UNKNOWN_LOCATION, CountryLookup, Geocoder
from heartmap.services.heart_store import HeartStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: type, latitude, longitude"
CREATE_FAILED_MESSAGE = "Failed to create heart"
FETCH_FAILED_MESSAGE = "Failed to fetch hearts"


def _missing_fields(payload: HeartCreate) -> List[str]:
    # type is falsy-checked (empty string counts as missing); coordinates
    # only need to be defined, so 0.0 is valid
    missing = []
    if not payload.type:
        missing.append("type")
    if payload.latitude is None:
        missing.append("latitude")
    if payload.longitude is None:
        missing.append("longitude")
    return missing


class HeartService:
    """
    Business logic for heart markers.

    Responsibilities:
        - create_heart(): validate → enrich → persist
        - list_hearts(): every marker, newest first
    """

    async def create_heart(
        self,
        store: HeartStore,
        geocoder: Geocoder,
        payload: HeartCreate,
    ) -> HeartResponse:
        """
        Create a heart marker.

        Args:
            store:    Injected persistence
            geocoder: Injected country enrichment
            payload:  Request body; unknown keys were already dropped

        Returns:
            The stored marker, including id and server timestamp.

        Raises:
            ValidationError: type, latitude or longitude missing
            DatabaseError:   the record could not be built or stored
        """
        missing = _missing_fields(payload)
        if missing:
            raise ValidationError(message=MISSING_FIELDS_MESSAGE, fields=missing)

        try:
            geo = await self._enrich(geocoder, payload.latitude, payload.longitude)

            heart = Heart(
                # Rejects values outside the enumeration
                type=HeartType(payload.type),
                latitude=payload.latitude,
                longitude=payload.longitude,
                message=payload.message or "",
                country_name=geo.country_name,
                country_code=geo.country_code,
                timestamp=datetime.now(timezone.utc),
            )

            stored = await store.add(heart)
            logger.info(
                "Heart %s created: %s at (%s, %s) in %s",
                stored.id,
                stored.type.value,
                stored.latitude,
                stored.longitude,
                stored.country_code,
            )
            return HeartResponse.model_validate(stored)

        except Exception as e:
            logger.error("Error creating heart: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=CREATE_FAILED_MESSAGE,
                context={"error_type": type(e).__name__},
            )

    async def _enrich(
        self, geocoder: Geocoder, latitude: float, longitude: float
    ) -> CountryLookup:
        """Geocoding is best-effort: a misbehaving geocoder must not fail the create."""
        try:
            return await geocoder.resolve_country(latitude, longitude)
        except Exception as e:
            logger.error(
                "Geocoder raised for (%s, %s): %s", latitude, longitude, str(e), exc_info=True
            )
            return UNKNOWN_LOCATION

    async def list_hearts(self, store: HeartStore) -> List[HeartResponse]:
        """
        List every stored heart, newest first.

        Raises:
            DatabaseError: the store could not be read
        """
        try:
            hearts = await store.list_newest_first()
            return [HeartResponse.model_validate(heart) for heart in hearts]
        except Exception as e:
            logger.error("Error fetching hearts: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=FETCH_FAILED_MESSAGE,
                context={"error_type": type(e).__name__},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
heart_service = HeartService()
