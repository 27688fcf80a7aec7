"""
HeartMap Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the two error tiers of the API.
Why:   Routes stay free of try/except; global handlers (registered in main.py)
       translate each exception type into a status code and a JSON body.
How:   Each exception carries a client-safe message and an optional context
       dict that is logged but never returned.

Exception Hierarchy:
    HeartMapError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── DatabaseError     → 500 Internal Server Error (generic message only)
    └── GeocodingError    → never reaches HTTP; absorbed by the geocoder

Error Tiers:
    Client errors are reported with a static descriptive message and are not
    logged as server faults. Server and dependency errors are logged with full
    detail and reported with a generic, per-operation message.
"""

from typing import Any, Dict, Optional


class HeartMapError(Exception):
    """
    Base exception for all HeartMap application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HeartMapError):
    """
    Raised when client input fails validation.

    When:    A heart submission is missing type, latitude or longitude.
    HTTP:    400 Bad Request

    FastAPI's own schema validation (wrong JSON types) still answers 422;
    this exception covers the presence rules the schema cannot express.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class DatabaseError(HeartMapError):
    """
    Raised when a store operation fails.

    HTTP:    500 Internal Server Error

    The message is the generic per-operation text ("Failed to create heart",
    "Failed to fetch hearts"). The underlying cause goes into `context` and
    the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class GeocodingError(HeartMapError):
    """
    Raised inside the geocoder when the reverse-geocoding service answers
    with a non-success status.

    Never propagates past the geocoder: the lookup converts it into the
    "an unknown location" fallback so marker creation is not blocked.
    """

    def __init__(
        self,
        message: str = "Reverse geocoding request failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
