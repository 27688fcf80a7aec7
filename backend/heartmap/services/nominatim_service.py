"""
HeartMap Backend — Nominatim Reverse Geocoder
==============================================

What:  Concrete Geocoder backed by OpenStreetMap Nominatim's /reverse endpoint.
Why:   Free, keyless, and returns a structured address with country and
       country_code at country-level zoom.
How:   One shared httpx.AsyncClient per process; each lookup is a single GET
       with zoom and language hints, interpreted into a typed CountryLookup.
Who:   Singleton created at import; called by HeartService for each new marker.
When:  Before the marker is written, while the create request waits.

Failure Policy:
    Non-success status     → logged with status and body, raised internally
                             as GeocodingError, absorbed at the boundary
    Transport / bad JSON   → logged, absorbed at the boundary
    Absorbed failures      → UNKNOWN_LOCATION ("an unknown location", "XX")
    No address / country   → OPEN_SEA ("the open sea", "XX")
    Country present        → ResolvedCountry(name, CODE)

    Only transport errors are retried, and only when max_attempts
    (GEOCODER_RETRY_MAX_ATTEMPTS) is above 1. The default is a single attempt.
"""

import logging
import time
import uuid
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from heartmap.config import settings
from heartmap.exceptions import GeocodingError
from heartmap.services.geocoder_base import (
    OPEN_SEA,
    UNKNOWN_LOCATION,
    CountryLookup,
    FallbackCountry,
    Geocoder,
    ResolvedCountry,
)

logger = logging.getLogger(__name__)


def _normalize_code(code: Any) -> str:
    """Uppercase a country code; anything that is not two letters becomes XX."""
    if not code or not isinstance(code, str):
        return "XX"
    upper = code.strip().upper()
    if len(upper) != 2 or not upper.isalpha():
        return "XX"
    return upper


def interpret_reverse_payload(payload: Any) -> CountryLookup:
    """
    Turn a Nominatim /reverse JSON body into a CountryLookup.

    Nominatim answers {"error": "Unable to geocode"} over open water, which
    has no "address" key and lands in the OPEN_SEA branch.
    """
    address = payload.get("address") if isinstance(payload, dict) else None
    if not address or not isinstance(address, dict):
        return OPEN_SEA

    country_code = _normalize_code(address.get("country_code"))
    country_name = address.get("country")
    if not country_name:
        return FallbackCountry(country_name=OPEN_SEA.country_name, country_code=country_code)

    return ResolvedCountry(country_name=country_name, country_code=country_code)


class NominatimGeocoder(Geocoder):
    """
    Reverse geocoder for country-level place names.

    The HTTP client is created lazily so importing this module never opens
    a connection pool; tests pass their own client (e.g. httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        zoom: Optional[int] = None,
        language: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        retry_initial_wait: float = 0.5,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        self.zoom = settings.geocoder_zoom if zoom is None else zoom
        self.language = language or settings.geocoder_language
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.timeout = timeout or settings.geocoder_timeout
        self.max_attempts = max_attempts or settings.geocoder_retry_max_attempts
        self.retry_initial_wait = retry_initial_wait
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"User-Agent": self.user_agent},
            )
        return self._client

    async def resolve_country(self, latitude: float, longitude: float) -> CountryLookup:
        """
        Resolve coordinates to a country; never raises.

        Flow:
            1. GET /reverse (retried on transport errors if configured)
            2. Non-success status → GeocodingError → UNKNOWN_LOCATION
            3. Parse JSON → interpret into ResolvedCountry / FallbackCountry
        """
        lookup_id = str(uuid.uuid4())[:8]
        start_time = time.perf_counter()

        try:
            payload = await self._reverse_with_retry(latitude, longitude, lookup_id)
        except Exception as e:
            logger.error(
                "[%s] Failed to get country for (%s, %s): %s",
                lookup_id,
                latitude,
                longitude,
                str(e) or type(e).__name__,
                exc_info=not isinstance(e, (GeocodingError, httpx.TransportError)),
            )
            return UNKNOWN_LOCATION

        result = interpret_reverse_payload(payload)
        logger.info(
            "[%s] Geocoded (%s, %s) → %s/%s in %.0fms",
            lookup_id,
            latitude,
            longitude,
            result.country_name,
            result.country_code,
            (time.perf_counter() - start_time) * 1000,
        )
        return result

    async def _reverse_with_retry(
        self, latitude: float, longitude: float, lookup_id: str
    ) -> Dict[str, Any]:
        """
        Wraps _reverse in tenacity. Non-success statuses are not retried:
        GeocodingError is outside the retry predicate.
        """
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(
                initial=self.retry_initial_wait, max=4, jitter=self.retry_initial_wait
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._reverse(latitude, longitude, lookup_id)

    async def _reverse(
        self, latitude: float, longitude: float, lookup_id: str
    ) -> Dict[str, Any]:
        """Single /reverse call."""
        response = await self._get_client().get(
            f"{self.base_url}/reverse",
            params={
                "format": "json",
                "lat": latitude,
                "lon": longitude,
                "zoom": self.zoom,
                "accept-language": self.language,
            },
            # Injected clients carry no default headers of ours
            headers={"User-Agent": self.user_agent},
        )

        if not response.is_success:
            logger.error(
                "[%s] Nominatim response not OK: %d %s",
                lookup_id,
                response.status_code,
                response.text[:500],
            )
            raise GeocodingError(
                message="Network response was not ok from Nominatim",
                status_code=response.status_code,
            )

        return response.json()

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()


# ── Singleton Instance ────────────────────────────────────────────────────
# Shared so every request reuses one connection pool to Nominatim
geocoder = NominatimGeocoder()


def get_geocoder() -> Geocoder:
    """FastAPI dependency returning the process-wide geocoder."""
    return geocoder
