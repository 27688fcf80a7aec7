# Middleware package init
"""
HeartMap Backend — Middleware Package
======================================

Middleware Chain:
    Request → [Request ID] → [Access Logging] → Route Handler

    Request ID runs first so the access log line carries the correlation ID.
    Responses pass back through in reverse order; the access logger records
    the final status code and duration.
"""
