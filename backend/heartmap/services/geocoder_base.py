"""
HeartMap Backend — Abstract Geocoder Interface
===============================================

What:  Abstract base class and result types for reverse-geocoding providers.
Why:   HeartService depends on this contract, not on Nominatim, so tests can
       inject a stub and another provider can be swapped in later.
How:   Concrete implementations inherit from Geocoder and implement
       resolve_country().

Result Model:
    A lookup never raises. It returns one of two typed outcomes:

        ResolvedCountry(country_name, country_code)
            The service named a country.
        FallbackCountry(country_name, country_code)
            The place could not be resolved; the name is a sentinel.

    Two fallback values exist and the difference is observable:
        UNKNOWN_LOCATION  ("an unknown location", "XX")
            The lookup itself failed: network error, timeout, bad status,
            malformed response.
        OPEN_SEA          ("the open sea", "XX")
            The lookup worked but returned no address, or an address
            without a country.
"""

from abc import ABC, abstractmethod
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class ResolvedCountry(BaseModel):
    """The geocoder named a country for the coordinates."""

    kind: Literal["resolved"] = "resolved"
    country_name: str
    country_code: str

    model_config = ConfigDict(frozen=True)


class FallbackCountry(BaseModel):
    """No country could be resolved; carries sentinel location values."""

    kind: Literal["fallback"] = "fallback"
    country_name: str
    country_code: str = "XX"

    model_config = ConfigDict(frozen=True)


CountryLookup = Union[ResolvedCountry, FallbackCountry]

UNKNOWN_LOCATION = FallbackCountry(country_name="an unknown location", country_code="XX")
OPEN_SEA = FallbackCountry(country_name="the open sea", country_code="XX")


class Geocoder(ABC):
    """
    Abstract interface for coordinate → country enrichment.

    Contract:
        - resolve_country() never raises; every failure becomes a FallbackCountry
        - country_code is always two uppercase letters or "XX"
        - implementations own their HTTP resources and release them in aclose()
    """

    @abstractmethod
    async def resolve_country(self, latitude: float, longitude: float) -> CountryLookup:
        """
        Resolve coordinates to a country name and ISO alpha-2 code.

        Args:
            latitude:  WGS84 latitude, passed through unchecked
            longitude: WGS84 longitude, passed through unchecked

        Returns:
            ResolvedCountry on success, FallbackCountry otherwise.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. Called on application shutdown."""
        return None
