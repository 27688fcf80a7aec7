"""
HeartMap Backend — Application Package Initializer
==================================================

What: Marks the `heartmap` directory as a Python package.
Why:  Enables module imports like `from heartmap.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, enrichment, orchestration
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Heart Store (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The store and the geocoder are injected into the routes through FastAPI
    dependencies, so each layer can be replaced by a fake in tests.
"""

__version__ = "1.0.0"
