"""
HeartMap Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract between frontend and backend.
Why:   Serialization, OpenAPI docs, and the camelCase JSON keys the map
       frontend reads (countryName, countryCode).
Who:   Used by route handlers as request bodies and return types.

Design Decision:
    HeartCreate declares every field optional. Presence of type, latitude
    and longitude is checked by HeartService so that a missing field answers
    400 with a fixed message instead of FastAPI's field-level 422.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from heartmap.models.heart import HeartType


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class HeartCreate(BaseModel):
    """
    What:  Body of POST /api/hearts.

    Unknown keys (including a client-supplied timestamp) are ignored; the
    server always assigns the timestamp itself.
    """
    type: Optional[str] = Field(
        default=None,
        description="Marker kind: redHeart, silverHeart or yellowHeart",
    )
    latitude: Optional[float] = Field(default=None, description="WGS84 latitude")
    longitude: Optional[float] = Field(default=None, description="WGS84 longitude")
    message: Optional[str] = Field(
        default=None,
        description="Optional note attached to the marker",
    )

    model_config = ConfigDict(extra="ignore")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class HeartResponse(BaseModel):
    """
    What:  A stored heart marker as returned by both create and list.
    How:   Built from the ORM row (from_attributes) and serialized with
           camelCase aliases.
    """
    id: uuid.UUID = Field(description="Store-assigned identifier")
    type: HeartType = Field(description="Marker kind")
    latitude: float
    longitude: float
    message: str = Field(default="")
    country_name: str = Field(description="Resolved country or a sentinel place name")
    country_code: str = Field(description="ISO alpha-2 code, uppercased, or XX")
    timestamp: datetime = Field(description="Server-assigned creation time (UTC)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; everything is stored in UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ErrorResponse(BaseModel):
    """
    What:  Error body for 400 and 500 responses: {"error": "<message>"}.
    Why:   The frontend shows the error string as-is.
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
